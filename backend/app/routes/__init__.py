# Routes package init
"""
Employee Directory Backend - API Routes Package
===============================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - employees.py: GET    /api/employees        (list)
                    POST   /api/employees        (create)
                    GET    /api/employees/{id}   (read one, null when absent)
                    PUT    /api/employees/{id}   (full replacement)
                    DELETE /api/employees/{id}   (delete)
    - health.py:    GET    /                     (liveness text)
                    GET    /health               (store connectivity)

Routes handle HTTP concerns only: extract path/body, call the gateway,
pick the status code. SQL lives in services/employee_gateway.py.
"""
