# Services package init
"""
Rural Sports Backend: Services Layer
=====================================

What:  Business logic between routes (HTTP) and the repository (persistence).
How:   One stateless service per resource, exposed as a module-level
       singleton; each call receives the request's AsyncSession.

Service Inventory:
    - CrudService (base):  list / get / create / update / delete + FK checks
    - UserService, AuthService
    - EventService, MaterialService, DonationService, LoanService, TeamService
    - InteractionService, StatsService
    - LLMService (abstract), GeminiService, ConsultService
    - FileService: cover image validation, storage and serving
"""
