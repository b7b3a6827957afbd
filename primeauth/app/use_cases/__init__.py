"""
Use Cases

Organized by area:
- auth/: End-user register, login, verify, logout
- accounts/: Platform account provisioning (admin API)
- applications/, licenses/, app_users/, blacklist/, activity/,
  sessions/, webhooks/: Owner console management

Import from subdirectories.
"""
