# Schemas package init
"""
Rural Sports Backend: API Contracts
====================================

Pydantic models for request bodies and responses, one module per resource.
JSON keys are camelCase on the wire (realName, conditionLevel, donorId) and
snake_case in Python; requests accept either spelling.
"""
