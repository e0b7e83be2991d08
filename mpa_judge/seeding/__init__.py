"""
Firestore/Auth seeding routines used by `scripts/seed_*.py`.
"""
