# FILE: ownshot/models/automotive.py
"""
Automotive options
"""
from typing import Dict, Literal

from ownshot.models.common import OptionsModel, Percent


AutoShotType = Literal["studio", "showroom", "outdoor", "detail", "action"]

AutoAngle = Literal[
    "three_quarter_front",
    "side_profile",
    "rear_three_quarter",
    "front",
    "rear",
    "interior",
    "wheel_detail",
    "engine",
]

AutoEnvironment = Literal[
    "dark_studio",
    "white_cyclorama",
    "showroom",
    "urban_street",
    "mountain_road",
    "coastal",
    "industrial",
    "parking_garage",
]

AutoLighting = Literal["dramatic", "soft_studio", "natural", "neon", "sunset", "overcast"]


class AutoOptions(OptionsModel):
    """Complete automotive options record"""
    shot_type: AutoShotType
    angle: AutoAngle
    environment: AutoEnvironment
    lighting: AutoLighting
    reflection_intensity: Percent
    dramatic_level: Percent
    show_movement: bool  # motion blur on wheels
    cleanup_reflections: bool
    enhance_details: bool  # chrome, paint, wheels
    strength: Percent


AUTO_SHOT_TYPE_LABELS: Dict[str, str] = {
    "studio": "Studio",
    "showroom": "Showroom",
    "outdoor": "Outdoor",
    "detail": "Detail Shot",
    "action": "Action Shot",
}

AUTO_ANGLE_LABELS: Dict[str, str] = {
    "three_quarter_front": "3/4 Front (Hero)",
    "side_profile": "Side Profile",
    "rear_three_quarter": "3/4 Rear",
    "front": "Front",
    "rear": "Rear",
    "interior": "Interior",
    "wheel_detail": "Wheel Detail",
    "engine": "Engine Bay",
}

AUTO_ENVIRONMENT_LABELS: Dict[str, str] = {
    "dark_studio": "Dark Studio",
    "white_cyclorama": "White Cyclorama",
    "showroom": "Showroom",
    "urban_street": "Urban Street",
    "mountain_road": "Mountain Road",
    "coastal": "Coastal Road",
    "industrial": "Industrial",
    "parking_garage": "Parking Garage",
}

AUTO_LIGHTING_LABELS: Dict[str, str] = {
    "dramatic": "Dramatic",
    "soft_studio": "Soft Studio",
    "natural": "Natural",
    "neon": "Neon",
    "sunset": "Sunset/Golden Hour",
    "overcast": "Overcast",
}

AUTO_LABEL_TABLES = {
    "shotType": AUTO_SHOT_TYPE_LABELS,
    "angle": AUTO_ANGLE_LABELS,
    "environment": AUTO_ENVIRONMENT_LABELS,
    "lighting": AUTO_LIGHTING_LABELS,
}

DEFAULT_AUTO_OPTIONS = AutoOptions.model_validate({
    "shotType": "studio",
    "angle": "three_quarter_front",
    "environment": "dark_studio",
    "lighting": "dramatic",
    "reflectionIntensity": 60,
    "dramaticLevel": 50,
    "showMovement": False,
    "cleanupReflections": True,
    "enhanceDetails": True,
    "strength": 70,
})
