from thermoweb.models.omnivory import OmnivoryModule, omnivory_rates

__all__ = ["OmnivoryModule", "omnivory_rates"]
