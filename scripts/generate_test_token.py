#!/usr/bin/env python3
"""Generate JWT tokens for manual API testing."""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core.auth import Role, create_access_token

# Generate admin token
admin_token = create_access_token("admin-test", role=Role.ADMIN.value, email="admin@example.com")
print(f"Admin Token:\n{admin_token}\n")

# Generate standard user token
user_token = create_access_token("user-test", role=Role.USER.value, email="user@example.com")
print(f"User Token:\n{user_token}")
