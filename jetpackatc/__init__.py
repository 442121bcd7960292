"""
jetpackatc - Jetpack Air Traffic Control simulation core

Simulates a fleet of jetpacks over a bounded city map: per-tick motion,
hazard handling, collision detection, emergency landings that avoid water,
and the parking cycle that recycles agents between flight and rest.
"""

__version__ = "0.1.0"
