"""
Stages resource: raw SQL in `repository.py`, HTTP endpoints in `router.py`.
"""
