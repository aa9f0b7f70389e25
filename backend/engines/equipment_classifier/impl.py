"""
Equipment Classifier - Implementation

Keyword-driven risk tiering of tools and plant with:
- Ordered first-match-wins rule chain
- Case-insensitive substring matching
- Fixed safety requirements per category
- Register building with de-duplication and counts
"""

import logging
import re
from functools import lru_cache
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .definition import (
    EquipmentClassification,
    EquipmentRegister,
    EquipmentRiskLevel,
    EquipmentRule,
    RuleOutcome,
)

logger = logging.getLogger(__name__)


# ============================================================================
# RULE KEYWORDS (priority order matters: overlapping keywords resolve to
# the first rule that lists them)
# ============================================================================

HAZARDOUS_KEYWORDS = (
    "explosive", "demolition", "high voltage", "x-ray", "radioactive",
    "asbestos removal", "asbestos",
)

WELDING_KEYWORDS = (
    "welding", "welder", "cutting torch", "plasma", "oxy", "acetylene",
    "brazing", "gas torch",
)

HIGH_RISK_POWER_TOOL_KEYWORDS = (
    "grinder", "disc cutter", "diamond saw", "circular saw", "chainsaw",
    "chain saw", "nail gun", "powder actuated", "brick saw", "drop saw",
    "mitre saw", "table saw",
)

HEAVY_PLANT_KEYWORDS = (
    "crane", "hoist", "excavator", "loader", "dozer", "telehandler",
    "forklift", "boom lift", "scissor lift", "cherry picker", "bobcat",
    "backhoe", "skid steer", "grader",
)

DEMOLITION_TOOL_KEYWORDS = (
    "jackhammer", "pneumatic breaker", "concrete saw", "demo hammer",
    "demolition hammer", "rotary hammer", "core drill", "kango",
    "chipping hammer",
)

PLANT_EQUIPMENT_KEYWORDS = (
    "compressor", "generator", "pressure washer", "pump", "concrete mixer",
    "cement mixer", "plate compactor", "vibrating plate", "concrete vibrator",
)

ACCESS_KEYWORDS = (
    "ladder", "step ladder", "extension ladder", "platform", "trestle",
    "a-frame", "podium",
)

POWER_TOOL_KEYWORDS = (
    "drill", "impact driver", "impact wrench", "router", "jigsaw",
    "reciprocating saw", "belt sander", "orbital sander", "sander", "planer",
    "heat gun", "multi-tool", "screw gun", "rivet gun",
)

SCAFFOLD_KEYWORDS = (
    "scaffold", "scaffolding", "mobile scaffold", "kwikstage", "cuplok",
    "tube and coupler",
)

HAND_TOOL_KEYWORDS = (
    "hammer", "screwdriver", "wrench", "spanner", "pliers", "chisel", "file",
    "hand saw", "handsaw", "hacksaw", "spirit level", "measuring tape",
    "tape measure", "broom", "bucket", "marker", "chalk", "string line",
    "level", "trowel", "float", "shovel", "spade", "rake", "crowbar",
    "pry bar", "utility knife", "stanley knife", "mallet", "clamp",
    "caulking gun", "paint brush", "paint roller", "mop", "squeegee",
)

# "demolition" is a hazardous-work cue only when it does not name a tool
_TOOL_NOUNS = r"(?:hammers?|saws?|breakers?|drills?|tools?)"
_HAZARDOUS_DEMOLITION = re.compile(rf"\bdemolition\b(?!\s+{_TOOL_NOUNS}\b)")


def _contains_any(keywords: Sequence[str]) -> Callable[[str], bool]:
    def predicate(name: str) -> bool:
        return any(keyword in name for keyword in keywords)
    return predicate


def _hazardous_predicate(name: str) -> bool:
    if _HAZARDOUS_DEMOLITION.search(name):
        return True
    return any(keyword in name for keyword in HAZARDOUS_KEYWORDS if keyword != "demolition")


# ============================================================================
# CATEGORY OUTCOMES
# ============================================================================

HAZARDOUS_MATERIALS = RuleOutcome(
    risk_level=EquipmentRiskLevel.CRITICAL,
    category="Hazardous Materials",
    certification_required=True,
    safety_requirements=(
        "Licensed operator or removalist only",
        "Hazardous work permit required",
        "Exclusion zone with signage",
        "Exposure monitoring in place",
        "Supervisor approval required",
        "Emergency response plan active",
    ),
)

WELDING_EQUIPMENT = RuleOutcome(
    risk_level=EquipmentRiskLevel.HIGH,
    category="Welding Equipment",
    certification_required=True,
    safety_requirements=(
        "Hot work permit required",
        "Fire extinguisher within reach",
        "Welding screens and ventilation",
        "Gas cylinders secured upright",
        "Flashback arrestors fitted",
    ),
)

HIGH_RISK_POWER_TOOLS = RuleOutcome(
    risk_level=EquipmentRiskLevel.HIGH,
    category="Power Tools",
    certification_required=False,
    safety_requirements=(
        "Guards fitted and functional",
        "Pre-use inspection required",
        "Face shield and hearing protection",
        "Test and tag current",
        "Trained operator only",
    ),
)

HEAVY_PLANT = RuleOutcome(
    risk_level=EquipmentRiskLevel.HIGH,
    category="Heavy Plant",
    certification_required=True,
    safety_requirements=(
        "Licensed operator",
        "Daily pre-start inspection",
        "Lift plan required",
        "Exclusion zones",
        "Spotter required",
    ),
)

DEMOLITION_TOOLS = RuleOutcome(
    risk_level=EquipmentRiskLevel.HIGH,
    category="Demolition Tools",
    certification_required=False,
    safety_requirements=(
        "Services located before cutting or drilling",
        "Silica dust suppression or extraction",
        "Hearing protection mandatory",
        "Vibration exposure limits observed",
        "Pre-use inspection required",
    ),
)

PLANT_EQUIPMENT = RuleOutcome(
    risk_level=EquipmentRiskLevel.MEDIUM,
    category="Plant Equipment",
    certification_required=False,
    safety_requirements=(
        "Pre-use inspection required",
        "Guards and isolation checked",
        "Ventilation for fuel-powered units",
        "Test and tag current",
    ),
)

ACCESS_EQUIPMENT = RuleOutcome(
    risk_level=EquipmentRiskLevel.MEDIUM,
    category="Access Equipment",
    certification_required=False,
    safety_requirements=(
        "Inspect before use",
        "Set up on stable, level ground",
        "Maintain three points of contact",
        "Do not exceed load rating",
        "Industrial rated equipment only",
    ),
)

POWER_TOOLS = RuleOutcome(
    risk_level=EquipmentRiskLevel.MEDIUM,
    category="Power Tools",
    certification_required=False,
    safety_requirements=(
        "Test and tag current",
        "Pre-use inspection required",
        "Eye and hearing protection",
        "Secure workpiece before use",
    ),
)

SCAFFOLDING = RuleOutcome(
    risk_level=EquipmentRiskLevel.MEDIUM,
    category="Scaffolding",
    certification_required=True,
    safety_requirements=(
        "Licensed scaffolder for erection above 4 m",
        "Scaffold tag inspected and current",
        "Handrails, midrails and toeboards fitted",
        "Inspect after adverse weather",
        "Do not exceed duty rating",
    ),
)

HAND_TOOLS = RuleOutcome(
    risk_level=EquipmentRiskLevel.LOW,
    category="Hand Tools",
    certification_required=False,
    safety_requirements=(
        "Visual inspection before use",
        "Use the correct tool for the task",
        "Store safely when not in use",
    ),
)

GENERAL_EQUIPMENT = RuleOutcome(
    risk_level=EquipmentRiskLevel.MEDIUM,
    category="General Equipment",
    certification_required=False,
    safety_requirements=(
        "Pre-use inspection required",
        "Follow manufacturer's instructions",
        "Operator competency confirmed",
    ),
)


EQUIPMENT_RULES: Tuple[EquipmentRule, ...] = (
    EquipmentRule(priority=1, keywords=HAZARDOUS_KEYWORDS,
                  predicate=_hazardous_predicate, outcome=HAZARDOUS_MATERIALS),
    EquipmentRule(priority=2, keywords=WELDING_KEYWORDS,
                  predicate=_contains_any(WELDING_KEYWORDS), outcome=WELDING_EQUIPMENT),
    EquipmentRule(priority=3, keywords=HIGH_RISK_POWER_TOOL_KEYWORDS,
                  predicate=_contains_any(HIGH_RISK_POWER_TOOL_KEYWORDS), outcome=HIGH_RISK_POWER_TOOLS),
    EquipmentRule(priority=4, keywords=HEAVY_PLANT_KEYWORDS,
                  predicate=_contains_any(HEAVY_PLANT_KEYWORDS), outcome=HEAVY_PLANT),
    EquipmentRule(priority=5, keywords=DEMOLITION_TOOL_KEYWORDS,
                  predicate=_contains_any(DEMOLITION_TOOL_KEYWORDS), outcome=DEMOLITION_TOOLS),
    EquipmentRule(priority=6, keywords=PLANT_EQUIPMENT_KEYWORDS,
                  predicate=_contains_any(PLANT_EQUIPMENT_KEYWORDS), outcome=PLANT_EQUIPMENT),
    EquipmentRule(priority=7, keywords=ACCESS_KEYWORDS,
                  predicate=_contains_any(ACCESS_KEYWORDS), outcome=ACCESS_EQUIPMENT),
    EquipmentRule(priority=8, keywords=POWER_TOOL_KEYWORDS,
                  predicate=_contains_any(POWER_TOOL_KEYWORDS), outcome=POWER_TOOLS),
    EquipmentRule(priority=9, keywords=SCAFFOLD_KEYWORDS,
                  predicate=_contains_any(SCAFFOLD_KEYWORDS), outcome=SCAFFOLDING),
    EquipmentRule(priority=10, keywords=HAND_TOOL_KEYWORDS,
                  predicate=_contains_any(HAND_TOOL_KEYWORDS), outcome=HAND_TOOLS),
)


def normalize_name(name: Optional[str]) -> str:
    """Lower-case and collapse whitespace."""
    return " ".join((name or "").lower().split())


class EquipmentClassifier:
    """
    First-match-wins equipment classifier.

    Rules are evaluated strictly in priority order; a later, more specific
    rule never overrides an earlier match.

    Usage:
        classifier = EquipmentClassifier()
        result = classifier.classify("Angle Grinder")
        print(result.risk_level, result.category)   # High, Power Tools
    """

    def __init__(
        self,
        rules: Sequence[EquipmentRule] = EQUIPMENT_RULES,
        default: RuleOutcome = GENERAL_EQUIPMENT,
        cache_size: int = 512,
    ):
        """
        Initialize the classifier.

        Args:
            rules: Ordered rule chain (default: EQUIPMENT_RULES)
            default: Outcome when no rule matches
            cache_size: Memoized name lookups kept per instance
        """
        self.rules = tuple(rules)
        self.default = default
        self._lookup = lru_cache(maxsize=cache_size)(self._first_match)

    def classify(self, name: str) -> EquipmentClassification:
        """
        Classify a single tool or plant name.

        Args:
            name: Free-text equipment name.

        Returns:
            EquipmentClassification; unmatched names fall into
            General Equipment (Medium).
        """
        outcome = self._lookup(normalize_name(name))
        return EquipmentClassification(
            name=name or "",
            risk_level=outcome.risk_level,
            category=outcome.category,
            certification_required=outcome.certification_required,
            safety_requirements=list(outcome.safety_requirements),
        )

    def classify_many(self, names: Iterable[str]) -> List[EquipmentClassification]:
        return [self.classify(name) for name in names]

    def build_register(self, names: Iterable[str]) -> EquipmentRegister:
        """
        Classify a list of tool names into an equipment register.

        Blank names are skipped and duplicates (ignoring case and spacing)
        are merged, keeping the first spelling.
        """
        seen = set()
        items: List[EquipmentClassification] = []
        for name in names:
            key = normalize_name(name)
            if not key or key in seen:
                continue
            seen.add(key)
            items.append(self.classify(name.strip()))

        register = EquipmentRegister(
            items=items,
            high_risk_count=sum(1 for item in items if item.is_high_risk),
            certification_required_count=sum(1 for item in items if item.certification_required),
        )
        logger.info(f"Equipment register built: {register.to_summary()}")
        return register

    def _first_match(self, normalized_name: str) -> RuleOutcome:
        if normalized_name:
            for rule in self.rules:
                if rule.matches(normalized_name):
                    logger.debug(
                        f"'{normalized_name}' matched rule {rule.priority} ({rule.outcome.category})"
                    )
                    return rule.outcome
        logger.debug(f"'{normalized_name}' matched no rule, using {self.default.category}")
        return self.default


# Convenience function
def classify_equipment(name: str) -> EquipmentClassification:
    """
    Classify a tool name with the default rule chain.

    Convenience function for simple use cases.
    """
    return _default_classifier().classify(name)


@lru_cache(maxsize=1)
def _default_classifier() -> EquipmentClassifier:
    return EquipmentClassifier()
