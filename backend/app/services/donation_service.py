"""
Rural Sports Backend: Donation Service
=======================================

Donation records (what was offered, in what condition, by whom). Plain CRUD;
the donator must be an existing user.
"""

from app.models.donation import Donation
from app.services.base import CrudService


class DonationService(CrudService[Donation]):
    model = Donation
    resource = "donation"
    user_refs = ("donator_id",)


donation_service = DonationService()
