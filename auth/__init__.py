"""
auth — User authentication module.

Provides:
  • JWT (HS256) creation & verification
  • Password hashing (bcrypt)
  • Register / Login / Me API routes
  • ``get_current_user_id`` FastAPI dependency
"""
