"""
Service layer for business logic.

This layer separates business logic from HTTP request handling,
so the star rules can be tested against a fake repository.
"""
