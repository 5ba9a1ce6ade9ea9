import sys

from cornerstones.assessments.enums import UserRole
from cornerstones.db.database import Base, RepositoryProvider, engine, transactional_session
from cornerstones.services.security import hash_password

"""
CLI usage:
python -m scripts.create_profile <teacher|student> <email> <password> <full name...>
"""

def main():
    if len(sys.argv) < 5:
        print("Usage: python -m scripts.create_profile <teacher|student> <email> <password> <full name>")
        sys.exit(1)
    role, email, password = sys.argv[1], sys.argv[2], sys.argv[3]
    full_name = " ".join(sys.argv[4:]).strip()
    if role not in {r.value for r in UserRole}:
        print("role must be 'teacher' or 'student'")
        sys.exit(1)
    if len(password) < 8:
        print("password must be at least 8 characters")
        sys.exit(1)
    Base.metadata.create_all(bind=engine)
    with transactional_session() as db:
        repos = RepositoryProvider(db)
        if repos.profiles.get_by_email(email):
            print(f"Profile {email} already exists")
            sys.exit(2)
        profile = repos.profiles.create(
            full_name=full_name,
            email=email,
            role=role,
            password_hash=hash_password(password),
        )
        profile_id = profile.id
    print(f"Created {role} profile id={profile_id} email={email.lower()}")

if __name__ == '__main__':
    main()
