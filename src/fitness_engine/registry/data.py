"""
Built-in exercise tables.

This is the fallback registry content, used when the exercise store is
unavailable or empty. Strength ratios are (weight lifted in kg) / (base in
kg), where the base is bodyweight ('bw') or skeletal muscle mass ('smm').
"""

from typing import Any, Dict


def _standard(base_type: str, category: str, male: tuple, female: tuple) -> Dict[str, Any]:
    return {
        "base_type": base_type,
        "category": category,
        "standards": {
            "Male": dict(zip(("intermediate", "advanced", "elite"), male)),
            "Female": dict(zip(("intermediate", "advanced", "elite"), female)),
        },
    }


STRENGTH_STANDARDS: Dict[str, Dict[str, Any]] = {
    "abdominal crunch": _standard("bw", "Core", (0.75, 1.0, 1.3), (0.60, 0.85, 1.15)),
    "abductor": _standard("bw", "Lower Body", (1.5, 2.0, 2.5), (1.25, 1.75, 2.25)),
    "adductor": _standard("bw", "Lower Body", (1.1, 1.6, 2.1), (1.00, 1.50, 2.25)),
    "back extension": _standard("bw", "Core", (0.80, 1.10, 1.50), (0.65, 0.95, 1.35)),
    "bench press": _standard("bw", "Upper Body", (1.0, 1.5, 2.0), (0.75, 1.0, 1.25)),
    "bicep curl": _standard("bw", "Upper Body", (0.35, 0.5, 0.75), (0.40, 0.70, 1.00)),
    "butterfly": _standard("bw", "Upper Body", (0.85, 1.15, 1.55), (0.60, 0.90, 1.30)),
    "chest press": _standard("bw", "Upper Body", (0.80, 1.15, 1.50), (0.55, 0.90, 1.25)),
    "glutes": _standard("smm", "Lower Body", (2.0, 2.5, 3.0), (2.2, 2.8, 3.4)),
    "hip thrust": _standard("bw", "Lower Body", (2.0, 3.0, 4.0), (1.50, 2.25, 3.00)),
    "lat pulldown": _standard("bw", "Upper Body", (0.9, 1.2, 1.5), (0.70, 0.95, 1.30)),
    "leg curl": _standard("bw", "Lower Body", (0.95, 1.25, 1.75), (0.75, 1.05, 1.45)),
    "leg extension": _standard("bw", "Lower Body", (1.5, 1.75, 2.5), (1.0, 1.25, 2.0)),
    "leg press": _standard("bw", "Lower Body", (2.2, 3.2, 4.3), (2.00, 3.25, 4.50)),
    "overhead press": _standard("bw", "Upper Body", (0.75, 1.0, 1.3), (0.50, 0.85, 1.20)),
    "reverse flys": _standard("bw", "Upper Body", (0.25, 0.40, 0.60), (0.20, 0.35, 0.55)),
    "rotary torso": _standard("smm", "Core", (0.8, 1.0, 1.2), (0.7, 0.9, 1.1)),
    "seated row": _standard("bw", "Upper Body", (1.0, 1.5, 2.0), (0.75, 1.25, 1.75)),
    "shoulder press": _standard("bw", "Upper Body", (0.75, 1.0, 1.3), (0.50, 0.85, 1.20)),
    "squat": _standard("bw", "Lower Body", (1.25, 1.75, 2.25), (1.0, 1.5, 2.0)),
    "triceps": _standard("bw", "Upper Body", (0.50, 0.75, 1.0), (0.75, 1.25, 1.50)),
}


# Canonical cardio activities in the fallback table
CARDIO_EXERCISES = (
    "run",
    "walk",
    "bike",
    "elliptical",
    "row",
    "swim",
    "jump rope",
    "stairs",
    "climbmill",
    "stairmaster",
    "treadmill",
    "hiit",
)

# Activity names that are not legacy names of a record but still point at one
CARDIO_ALIAS_MAP: Dict[str, str] = {
    "running": "run",
    "jog": "run",
    "jogging": "run",
    "sprint": "run",
    "sprinting": "run",
    "walking": "walk",
    "biking": "bike",
    "cycling": "bike",
    "cycle": "bike",
    "stationary bike": "bike",
    "swimming": "swim",
    "rowing": "row",
    "rower": "row",
    "skipping": "jump rope",
    "stair climbing": "stairs",
    "high intensity interval training": "hiit",
}

# Names that resolved to a canonical exercise before the registry existed
LEGACY_CANONICAL_FALLBACKS: Dict[str, str] = {
    "chest press": "machine chest press",
}

# Plural and spelling variants of classified lifts
LIFT_NAME_ALIASES: Dict[str, str] = {
    "lat pull": "lat pulldown",
    "biceps curl": "bicep curl",
    "reverse fly": "reverse flys",
    "tricep extension": "triceps",
    "tricep pushdown": "triceps",
    "squats": "squat",
    "abdominal crunches": "abdominal crunch",
    "abductors": "abductor",
    "adductors": "adductor",
    "back extensions": "back extension",
    "bench presses": "bench press",
    "bicep curls": "bicep curl",
    "butterflies": "butterfly",
    "chest presses": "chest press",
    "hip thrusts": "hip thrust",
    "lat pulldowns": "lat pulldown",
    "leg curls": "leg curl",
    "leg extensions": "leg extension",
    "leg presses": "leg press",
    "overhead presses": "overhead press",
    "rotary torsos": "rotary torso",
    "seated rows": "seated row",
    "shoulder presses": "shoulder press",
    "cable glute kickbacks": "cable glute kickback",
    "bulgarian split squats": "bulgarian split squat",
}


def _ratio(target: float, lower: float, upper: float) -> Dict[str, float]:
    return {"target_ratio": target, "lower_bound": lower, "upper_bound": upper}


_PUSH_PULL_FEMALE = {
    "Beginner": _ratio(0.55, 0.50, 0.60),
    "Intermediate": _ratio(0.62, 0.60, 0.65),
    "Advanced": _ratio(0.67, 0.65, 0.70),
    "Elite": _ratio(0.67, 0.65, 0.70),
}
_PUSH_PULL_MALE = {
    "Beginner": _ratio(0.60, 0.55, 0.65),
    "Intermediate": _ratio(0.70, 0.65, 0.75),
    "Advanced": _ratio(0.75, 0.70, 0.80),
    "Elite": _ratio(0.75, 0.70, 0.80),
}

# Balanced ratio bands between opposing lifts, by gender and strength level
STRENGTH_RATIOS: Dict[str, Dict[str, Dict[str, Dict[str, float]]]] = {
    "Vertical Push vs. Pull": {
        "Female": _PUSH_PULL_FEMALE,
        "Male": _PUSH_PULL_MALE,
    },
    "Horizontal Push vs. Pull": {
        "Female": _PUSH_PULL_FEMALE,
        "Male": _PUSH_PULL_MALE,
    },
    "Hamstring vs. Quad": {
        "Female": {
            "Beginner": _ratio(0.63, 0.60, 0.67),
            "Intermediate": _ratio(0.68, 0.65, 0.72),
            "Advanced": _ratio(0.74, 0.70, 0.78),
            "Elite": _ratio(0.74, 0.70, 0.78),
        },
        "Male": {
            "Beginner": _ratio(0.60, 0.55, 0.65),
            "Intermediate": _ratio(0.65, 0.60, 0.70),
            "Advanced": _ratio(0.71, 0.67, 0.75),
            "Elite": _ratio(0.71, 0.67, 0.75),
        },
    },
    "Adductor vs. Abductor": {
        "Female": {
            "Beginner": _ratio(0.75, 0.65, 0.85),
            "Intermediate": _ratio(0.80, 0.70, 0.90),
            "Advanced": _ratio(0.85, 0.75, 0.95),
            "Elite": _ratio(0.85, 0.75, 0.95),
        },
        "Male": {
            "Beginner": _ratio(0.75, 0.65, 0.85),
            "Intermediate": _ratio(0.82, 0.75, 0.90),
            "Advanced": _ratio(0.87, 0.80, 0.95),
            "Elite": _ratio(0.87, 0.80, 0.95),
        },
    },
}
