# Routes package init
"""
Rural Sports Backend: API Routes Package
=========================================

Route Inventory:
    - auth.py:          POST /api/login, POST /api/logout
    - users.py:         /api/users (register is public)
    - events.py:        /api/events, sign-ups, cover images
    - materials.py:     /api/materials donate / borrow / return / status
    - donations.py:     /api/donations
    - loans.py:         /api/loans
    - teams.py:         /api/teams
    - interactions.py:  /api/interactions
    - stats.py:         /api/stats/participation
    - consult.py:       POST /api/consult
    - files.py:         GET /api/files/{path} (public)
    - health.py:        GET /health (public)

Routes stay thin: parse the request, call one service, shape the response.
Everything under /api except register, login, logout and files requires the
session cookie (router-level Depends(get_current_user)).
"""
