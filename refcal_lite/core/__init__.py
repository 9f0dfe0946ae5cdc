"""Configuration for the refcal_lite outer surface."""
