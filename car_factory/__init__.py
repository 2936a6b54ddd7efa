"""
Car Factory - Abstract Factory illustration for matched car families

Two product families (sports car, family car) are offered by two brands
(Mazda, Ford). Factories produce matched pairs so that client code never
depends on the concrete brand it is handed.
"""

__version__ = "0.1.0"
__author__ = "Car Factory Team"
