from thermoweb.interval import Interval

__all__ = ["Interval"]
