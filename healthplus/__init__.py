"""
HealthCare+ portal: domain state engine for appointments, teleconsultation,
pharmacy commerce and notifications.
"""

__version__ = "0.1.0"
