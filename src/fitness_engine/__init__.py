"""
fitness-engine: strength levels, calorie estimates and cardio targets.

Pure calculations over in-memory records. Exercise names are resolved
through an ``ExerciseRegistry`` supplied by the caller (or the built-in
fallback registry).
"""

__version__ = "0.1.0"
