import os
import logging
from flask import Flask

from models import db
from routes.api import api_bp
from roster.seed import seed

# --- Configuration ---
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
DATA_DIR = os.path.join(BASE_DIR, 'data')

def create_app(test_config=None):
    app = Flask(__name__)
    app.config['SECRET_KEY'] = os.environ.get('ROSTER_SECRET_KEY', 'dev-secret-key-change-me')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get(
        'ROSTER_DATABASE_URL', f'sqlite:///{os.path.join(DATA_DIR, "roster.db")}'
    )
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    if test_config is not None:
        app.config.update(test_config)

    db.init_app(app)

    # Register Blueprints
    app.register_blueprint(api_bp)

    # --- CLI commands for DB ---
    @app.cli.command("init-db")
    def init_db_command():
        """Initializes the database tables."""
        _init_db_tables()
        print("Initialized the database tables.")

    @app.cli.command("seed-db")
    def seed_db_command():
        """Inserts the sample Argentina roster into empty tables."""
        inserted = seed()
        for table, count in inserted.items():
            if count:
                print(f"Seeded {count} rows into '{table}'.")
            else:
                print(f"Table '{table}' already has data. Skipping.")

    def _init_db_tables():
        """Helper function to create database tables and the sqlite directory."""
        uri = app.config['SQLALCHEMY_DATABASE_URI']
        if uri.startswith('sqlite:///'):
            db_dir = os.path.dirname(uri.replace('sqlite:///', ''))
            if db_dir and not os.path.exists(db_dir):
                os.makedirs(db_dir)
                print(f"Created database directory: {db_dir}")
        db.create_all()

    # Create tables on app creation as well for convenience during development
    with app.app_context():
        _init_db_tables()

    return app

if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    create_app().run(debug=True)
