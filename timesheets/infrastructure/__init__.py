"""
Infrastructure layer: persistence, notifications and event wiring.
"""
