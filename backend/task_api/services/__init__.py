"""Services Layer — request orchestration between the API and the store.

Invariants:
    - Services receive their store explicitly (constructor injection)
    - Services never import FastAPI
"""
