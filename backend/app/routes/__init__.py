# Routes package init
"""
Notedeck Backend — API Routes Package
=======================================

Route Inventory:
    - auth.py:    POST /api/auth/register, POST /api/auth/login
    - notes.py:   GET/POST /api/notes, PUT/PATCH/DELETE /api/notes/{id}   (bearer token)
    - todos.py:   GET/POST /api/todos, GET/PUT/PATCH/DELETE /api/todos/{id}
    - health.py:  GET /health

Routes are thin: extract request data, call a service, return the result.
"""
