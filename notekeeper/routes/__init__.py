# Routes package init
"""
Notekeeper — API Routes Package
=================================

Route Inventory:
    - notes.py:   GET    /api/notes          (list notes, newest first)
                  POST   /api/notes          (create a note)
                  DELETE /api/notes/{id}     (delete a note)
    - health.py:  GET    /health             (service health check)
                  GET    /api/test           (liveness ping)

Routes are thin: they extract request data, call NoteService and wrap the
result in the response envelope. Business rules live in the service.
"""
