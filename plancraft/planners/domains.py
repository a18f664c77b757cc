"""Goal domain classification and the per-domain content tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple


class GoalDomain(str, Enum):
    LANGUAGE = "language"
    FITNESS = "fitness"
    BUSINESS = "business"
    GENERIC = "generic"


# Checked in order; the first domain with a matching keyword wins.
_DOMAIN_KEYWORDS: Tuple[Tuple[GoalDomain, Tuple[str, ...]], ...] = (
    (GoalDomain.LANGUAGE, ("learn", "language")),
    (GoalDomain.FITNESS, ("fitness", "weight", "exercise")),
    (GoalDomain.BUSINESS, ("business", "startup")),
)


def classify_goal_domain(goal: str) -> GoalDomain:
    """Pick the content domain for a goal using plain substring matching."""

    lowered = goal.lower()
    for domain, keywords in _DOMAIN_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return domain
    return GoalDomain.GENERIC


@dataclass(frozen=True)
class DomainCatalog:
    """Fixed text tables for one goal domain, indexed by phase (and action)."""

    titles: Sequence[str]
    resources: Sequence[str] = ()
    tips: Sequence[str] = ()
    checkpoint: str = "Assess progress and adjust approach"
    descriptions: Sequence[str] = ()
    description_fallback: Optional[str] = None
    milestones: Sequence[str] = ()
    action_titles: Sequence[Sequence[str]] = ()
    phase_resources: Sequence[Sequence[str]] = ()

    def title(self, phase_number: int) -> str:
        return _lookup(self.titles, phase_number) or f"Phase {phase_number}"

    def description(self, phase_number: int, goal: str) -> str:
        if not self.descriptions:
            return f"Phase {phase_number} of your journey towards achieving {goal}"
        found = _lookup(self.descriptions, phase_number)
        if found:
            return found
        return (self.description_fallback or "Phase {n}").format(n=phase_number)

    def milestone(self, phase_number: int) -> str:
        if not self.milestones:
            return f"Successfully completed phase {phase_number} objectives"
        return _lookup(self.milestones, phase_number) or f"Phase {phase_number} milestone achieved"

    def action_title(self, phase_number: int, action_number: int) -> str:
        row = _lookup(self.action_titles, phase_number)
        title = _lookup(row, action_number) if row else None
        return title or f"Action {action_number} - Phase {phase_number}"

    def resources_for_phase(self, phase_number: int) -> Sequence[str]:
        return _lookup(self.phase_resources, phase_number) or ()


def _lookup(table, number: int):
    """1-based lookup returning ``None`` when out of range."""

    if 1 <= number <= len(table):
        return table[number - 1]
    return None


CATALOGS = {
    GoalDomain.LANGUAGE: DomainCatalog(
        titles=(
            "Foundation & Basics",
            "Building Vocabulary",
            "Grammar & Structure",
            "Conversation Practice",
            "Advanced Skills",
            "Fluency & Mastery",
        ),
        descriptions=(
            "Master the fundamentals and basic vocabulary",
            "Expand vocabulary and learn common phrases",
            "Understand grammar rules and sentence structure",
            "Practice speaking and listening skills",
            "Develop advanced communication abilities",
            "Achieve fluency and natural conversation",
        ),
        description_fallback="Continue developing your skills in phase {n}",
        milestones=(
            "Can introduce yourself and handle basic interactions",
            "Understand and use 500+ common words",
            "Can form grammatically correct sentences",
            "Can have 10-minute conversations",
            "Can read and write complex texts",
            "Achieved conversational fluency",
        ),
        action_titles=(
            ("Learn basic greetings", "Practice pronunciation", "Study alphabet/writing system"),
            ("Build core vocabulary", "Practice common phrases", "Listen to native speakers"),
            ("Study grammar basics", "Practice sentence formation", "Read simple texts"),
            ("Have conversations", "Watch movies/shows", "Practice speaking daily"),
            ("Read complex texts", "Write essays/stories", "Engage in debates"),
            ("Maintain fluency", "Learn specialized vocabulary", "Perfect pronunciation"),
        ),
        phase_resources=(
            ("Duolingo app", "Language learning books", "Pronunciation guides"),
            ("Flashcard apps", "Audio courses", "Language exchange apps"),
            ("Grammar workbooks", "Online exercises", "Language forums"),
            ("Conversation practice apps", "Movies with subtitles", "Podcasts"),
            ("Advanced textbooks", "Literature", "Writing communities"),
            ("Professional materials", "Specialized dictionaries", "Native speaker groups"),
        ),
        resources=(
            "Language learning apps",
            "Online dictionaries",
            "Grammar guides",
            "Conversation practice platforms",
        ),
        tips=(
            "Practice speaking from day one, even if you feel uncomfortable",
            "Immerse yourself in the language through media and culture",
            "Find a language exchange partner or conversation group",
        ),
        checkpoint="Test vocabulary and grammar knowledge",
    ),
    GoalDomain.FITNESS: DomainCatalog(
        titles=(
            "Assessment & Foundation",
            "Building Habits",
            "Increasing Intensity",
            "Strength & Endurance",
            "Advanced Training",
            "Maintenance",
        ),
        descriptions=(
            "Assess current fitness level and establish baseline",
            "Build consistent exercise habits and basic strength",
            "Increase workout intensity and add variety",
            "Focus on strength building and endurance",
            "Advanced training techniques and specialization",
            "Maintain results and continue progression",
        ),
        description_fallback="Continue your fitness journey in phase {n}",
        milestones=(
            "Established baseline fitness level",
            "Built consistent exercise habits",
            "Increased strength and endurance",
            "Achieved significant fitness gains",
            "Reached advanced fitness level",
            "Maintained long-term fitness goals",
        ),
        action_titles=(
            ("Take fitness assessment", "Set up workout space", "Plan nutrition"),
            ("Daily cardio routine", "Basic strength training", "Track progress"),
            ("Increase workout intensity", "Add new exercises", "Improve form"),
            ("Advanced strength training", "Endurance challenges", "Flexibility work"),
            ("Specialized training", "Competition prep", "Peak performance"),
            ("Maintain routine", "Adjust as needed", "Long-term goals"),
        ),
        phase_resources=(
            ("Fitness assessment tools", "Workout tracking apps", "Nutrition guides"),
            ("Beginner workout videos", "Basic equipment guide", "Meal planning apps"),
            ("Intermediate training programs", "Form check videos", "Progress tracking"),
            ("Advanced workout plans", "Specialized equipment", "Performance metrics"),
            ("Competition training guides", "Advanced nutrition", "Recovery protocols"),
            ("Maintenance programs", "Long-term planning", "Injury prevention"),
        ),
        resources=(
            "Fitness tracking apps",
            "Workout videos",
            "Nutrition guides",
            "Exercise equipment guides",
        ),
        tips=(
            "Focus on form over intensity, especially when starting",
            "Allow adequate rest and recovery between workouts",
            "Combine exercise with proper nutrition for best results",
        ),
        checkpoint="Measure fitness progress and adjust plan",
    ),
    GoalDomain.BUSINESS: DomainCatalog(
        titles=(
            "Research & Planning",
            "Foundation Setup",
            "Product Development",
            "Marketing & Launch",
            "Growth & Scaling",
            "Optimization",
        ),
        resources=(
            "Business plan templates",
            "Market research tools",
            "Accounting software",
            "Marketing platforms",
        ),
        tips=(
            "Validate your idea with potential customers early",
            "Start small and iterate based on feedback",
            "Network with other entrepreneurs and mentors",
        ),
        checkpoint="Review business metrics and milestones",
    ),
    GoalDomain.GENERIC: DomainCatalog(
        titles=(
            "Foundation",
            "Development",
            "Implementation",
            "Advanced Practice",
            "Mastery",
            "Optimization",
        ),
    ),
}


def catalog_for(domain: GoalDomain) -> DomainCatalog:
    return CATALOGS[domain]


__all__ = ["CATALOGS", "DomainCatalog", "GoalDomain", "catalog_for", "classify_goal_domain"]
