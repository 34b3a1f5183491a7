"""
Service layer.

``music_store`` holds the shared in‑memory state of the application and
all business rules around it.  The API handlers only translate between
HTTP and store calls.
"""
