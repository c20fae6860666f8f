# Services package init
"""
Employee Directory Backend - Services Layer
===========================================

What:  Persistence layer sitting between routes (HTTP) and the store.
How:   Services accept request schemas, run store statements, and return
       response schemas. Routes receive them through FastAPI dependencies.

Service Inventory:
    - EmployeeGateway: CRUD on the employee table with the read/write
      error policy described in employee_gateway.py
"""
