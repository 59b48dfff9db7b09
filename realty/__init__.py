"""Real-estate marketplace API package.

Brokers, property seekers and the admin notification channel share one
FastAPI service backed by a SQLAlchemy store.
"""
