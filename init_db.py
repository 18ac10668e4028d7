#!/usr/bin/env python
"""Database initialization script for the translation backend.

This script creates all database tables and seeds the default site
languages. Run this once before starting the application for the first time.

Usage:
    python init_db.py
"""

import os
import sys
from app import create_app, db

def init_database():
    """Initialize the database by creating all tables and default languages."""
    
    # Create Flask app
    config_name = os.getenv('FLASK_ENV', 'development')
    app = create_app(config_name)
    
    print(f"\n{'='*60}")
    print(f"Database Initialization for {config_name.upper()} Environment")
    print(f"{'='*60}\n")
    
    # Push app context
    with app.app_context():
        try:
            print("Creating database tables...")
            print(f"Database URI: {app.config['SQLALCHEMY_DATABASE_URI']}\n")
            
            # Create all tables
            db.create_all()
            
            print("✅ Database tables created successfully!\n")
            
            tables_info = [
                ("kv_entries", "Durable translation cache and rate-limit state"),
                ("language_settings", "Languages the site can be viewed in"),
                ("ui_translations", "Static interface strings per language"),
            ]
            
            print("Created tables:")
            for table_name, description in tables_info:
                print(f"  ✓ {table_name:<25} - {description}")
            
            from app.models import seed_default_languages
            added = seed_default_languages()
            if added:
                print(f"\n  ✓ Seeded {added} default languages")
            else:
                print("\n  - Languages already present, skipping seed")
            
            print(f"\n{'='*60}")
            print("✅ Database initialization complete!")
            print(f"{'='*60}\n")
            print("Next steps:")
            print("  1. Start the Flask server: python wsgi.py")
            print("  2. Test translation endpoint: POST /api/translate")
            print("\n")
            
            return True
            
        except Exception as e:
            print(f"❌ Error creating database: {e}\n")
            print(f"Traceback: {type(e).__name__}: {str(e)}")
            return False

if __name__ == '__main__':
    success = init_database()
    sys.exit(0 if success else 1)
