"""
Use Cases

Organized into domain folders:
- credentials/: Member credential issuance and gate validation
- guests/: Guest registration and visitor passes
- access_logs/: Gate audit trail
- directory/: Organization and roster lookups
- admin/: Registration stand-ins (organizations, members, deactivation)
"""
