from sqlalchemy import inspect

from roster.exceptions import ValidationError


def record_from_payload(model_class, payload, key=None):
    """
    Build a transient model instance from a JSON body.
    Only column attributes are accepted; when the URL carries a key it wins
    over the body, and a conflicting key in the body is rejected.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    mapper = inspect(model_class)
    columns = {attr.key for attr in mapper.column_attrs}
    for name in payload:
        if name not in columns:
            raise ValidationError(f"Unknown field '{name}'", name)

    key_name = mapper.get_property_by_column(mapper.primary_key[0]).key
    body_key = payload.get(key_name)
    if body_key is not None and (isinstance(body_key, bool) or not isinstance(body_key, int)):
        raise ValidationError(f"'{key_name}' must be an integer", key_name)

    if key is not None:
        if payload.get(key_name, key) != key:
            raise ValidationError(f"'{key_name}' in body does not match the URL", key_name)
        payload = dict(payload, **{key_name: key})

    return model_class(**payload)
