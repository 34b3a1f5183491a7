"""
Pydantic schema definitions for API payloads.

The same models serve as the entities kept by the music store.  Wire
names are camelCase (``secretCode``, ``userID``, ``musicURL``) while
Python attributes are snake_case; request bodies accept either form.
"""
