"""
Génère la valeur de ADMIN_PASSWORD_HASH (bcrypt).

Usage:
    python -m ferfam.admin.hash_password            # saisie masquée
    python -m ferfam.admin.hash_password "secret"
"""
import sys
from getpass import getpass

import bcrypt

def generate_hash(password: str) -> str:
    # Hash bcrypt avec salt auto
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")

def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    password = args[0] if args else getpass("Admin password: ")
    if not password:
        print("Empty password refused", file=sys.stderr)
        return 1
    print(f"ADMIN_PASSWORD_HASH={generate_hash(password)}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
