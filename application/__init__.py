"""
Application Layer for the Workout Tracker API.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- use_cases/: Auth and workout operations coordinating ports and domain models
- exceptions.py: Error taxonomy shared with the infrastructure layer
"""
