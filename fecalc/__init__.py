"""Combat forecast calculator for turn-based tactics units.

Loads unit and weapon definitions from YAML and reports damage, accuracy
and double-attack status for one attacker against one or more defenders.
"""

__version__ = "0.1.0"
