"""
Stock CRUD feature: schemas, SQL, business logic and HTTP routes.
"""
