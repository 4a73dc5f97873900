# Repositories package init
"""
Rural Sports Backend: Data Access Layer
========================================

What:  A single generic async repository used by every service.
Why:   Each resource only needs get / list / add / delete / count; one class
       bound to a model covers them all without per-entity boilerplate.
"""

from app.repositories.base import Repository

__all__ = ["Repository"]
