"""Promote a user to admin by email, creating the account if needed.

Usage: python scripts/make_admin.py EMAIL [PASSWORD]
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from blogcms import create_app
from blogcms.extensions import db
from blogcms.models import User


def main(argv):
    if len(argv) < 2:
        print(__doc__)
        return 1
    
    email = argv[1].strip().lower()
    password = argv[2] if len(argv) > 2 else None
    
    app = create_app()
    with app.app_context():
        user = User.query.filter_by(email=email).first()
        
        if not user:
            if not password:
                print(f"No user {email}; pass a password to create one")
                return 1
            user = User(email=email, is_admin=True)
            user.set_password(password)
            db.session.add(user)
            print("New admin user created")
        else:
            user.is_admin = True
            print("Existing user promoted to admin")
        
        db.session.commit()
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
