#!/usr/bin/env python3
"""Seed static interface strings.

English labels are written as-is. With --translate, every other active
language gets machine-translated labels for keys it does not have yet.

Usage:
    python scripts/seed_ui_translations.py [--translate]
"""

import sys
import os

# Add parent directory to path to import app modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import create_app, db
from app.constants.languages import DEFAULT_LANGUAGE
from app.models import LanguageSetting, UiTranslation, seed_default_languages

# Interface labels in the default language
UI_STRINGS = {
    'nav.home': 'Home',
    'nav.programs': 'Programs',
    'nav.courses': 'Courses',
    'nav.articles': 'Articles',
    'nav.events': 'Events',
    'nav.gallery': 'Gallery',
    'nav.teachers': 'Teachers',
    'nav.about': 'About Us',
    'common.read_more': 'Read more',
    'common.register': 'Register',
    'common.view_details': 'View details',
    'events.upcoming': 'Upcoming events',
    'footer.contact': 'Contact us',
}


def upsert_string(language_code, key, value):
    """Insert or update one string and commit it. Returns True when a row was added."""
    existing = UiTranslation.query.filter_by(
        language_code=language_code, translation_key=key
    ).first()
    if existing:
        existing.translation_value = value
        db.session.commit()
        return False
    db.session.add(UiTranslation(
        language_code=language_code,
        translation_key=key,
        translation_value=value
    ))
    db.session.commit()
    return True


def seed_ui_translations(translate=False):
    """Seed the ui_translations table."""
    app = create_app()
    
    with app.app_context():
        print("Starting UI string seeding...")
        seed_default_languages()
        
        added_count = 0
        for key, value in UI_STRINGS.items():
            if upsert_string(DEFAULT_LANGUAGE, key, value):
                added_count += 1
        print(f"Default language ({DEFAULT_LANGUAGE}): {added_count} added")
        
        if translate:
            service = app.extensions['translation_service']
            for language in LanguageSetting.active_languages():
                code = language.language_code
                if code == DEFAULT_LANGUAGE:
                    continue
                
                present = UiTranslation.as_map(code)
                missing = [key for key in UI_STRINGS if key not in present]
                print(f"\nProcessing language: {code} ({len(missing)} missing)")
                
                for key in missing:
                    outcome = service.translate_with_outcome(UI_STRINGS[key], code, DEFAULT_LANGUAGE)
                    if not outcome.is_translated:
                        print(f"  Skipped: {key} ({outcome.status.value})")
                        continue
                    upsert_string(code, key, outcome.text)
                    added_count += 1
                    print(f"  Added: {key} = {outcome.text}")
        
        # Summary
        total_count = UiTranslation.query.count()
        print(f"\n" + "="*50)
        print(f"UI string seeding completed!")
        print(f"Added: {added_count} new strings")
        print(f"Total strings in database: {total_count}")
        print("="*50)


if __name__ == '__main__':
    seed_ui_translations(translate='--translate' in sys.argv[1:])
