"""
Core architecture components for the HealthCare+ portal
"""
