"""
Utility modules organized by domain.

Submodules:
- logging: Logging configuration
- threading: Main event loop dispatch
- ui: Terminal output for the simulation
"""
