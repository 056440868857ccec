"""
Web layer: Flask blueprints over the roster services
"""
