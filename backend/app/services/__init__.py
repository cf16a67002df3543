# Services package init
"""
Notedeck Backend — Services Layer
===================================

Service Inventory:
    - PasswordService: bcrypt hash / verify
    - TokenService:    bearer token issue / verify (PyJWT)
    - AuthService:     register and login
    - NoteService:     owner-scoped note CRUD
    - TodoService:     unscoped todo CRUD

Services raise app.exceptions types; routes never build error responses.
"""
