"""
Equipment Classifier Engine

Risk tiering of tools and plant through an ordered keyword rule chain.
"""

from .definition import (
    EquipmentClassification,
    EquipmentRegister,
    EquipmentRiskLevel,
    EquipmentRule,
    RuleOutcome,
)

from .impl import (
    EquipmentClassifier,
    classify_equipment,
    normalize_name,
    EQUIPMENT_RULES,
    GENERAL_EQUIPMENT,
)

__all__ = [
    # Classes
    "EquipmentClassifier",
    # Models
    "EquipmentClassification",
    "EquipmentRegister",
    "EquipmentRiskLevel",
    "EquipmentRule",
    "RuleOutcome",
    # Functions
    "classify_equipment",
    "normalize_name",
    # Constants
    "EQUIPMENT_RULES",
    "GENERAL_EQUIPMENT",
]
