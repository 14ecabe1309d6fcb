from dataclasses import dataclass, replace
from typing import Any, Dict, List, Literal, Tuple

PrimaryPath = Literal["academic", "applied_sciences", "apprenticeship", "both", "postgraduate"]


@dataclass(frozen=True)
class TemplateVariant:
    key: str
    primary_path: PrimaryPath
    sections: Tuple[str, ...]
    links: Tuple[str, ...]
    university_allowed: bool


# Section and link ids are resolved to text in core/prompting.py.
EDUCATION_VARIANTS: Dict[str, TemplateVariant] = {
    "abitur": TemplateVariant(
        key="abitur",
        primary_path="academic",
        sections=(
            "profile",
            "top_careers_academic",
            "university_recommendations",
            "dual_study",
            "next_steps",
            "alternatives",
            "further_training",
        ),
        links=("hochschulkompass", "berufenet", "ausbildung_de"),
        university_allowed=True,
    ),
    "fachabitur": TemplateVariant(
        key="fachabitur",
        primary_path="applied_sciences",
        sections=(
            "profile",
            "top_careers_applied",
            "applied_sciences_recommendations",
            "dual_study",
            "next_steps",
            "alternatives",
            "further_training",
        ),
        links=("hochschulkompass_fh", "berufenet", "ausbildung_de"),
        university_allowed=False,
    ),
    "realschule": TemplateVariant(
        key="realschule",
        primary_path="apprenticeship",
        sections=(
            "profile",
            "top_careers_apprenticeship",
            "second_chance_realschule",
            "next_steps",
            "alternatives",
            "further_training",
        ),
        links=("ausbildung_de", "berufenet"),
        university_allowed=False,
    ),
    "hauptschule": TemplateVariant(
        key="hauptschule",
        primary_path="apprenticeship",
        sections=(
            "profile",
            "top_careers_apprenticeship",
            "second_chance_hauptschule",
            "next_steps",
            "alternatives",
            "further_training",
        ),
        links=("ausbildung_de", "berufenet"),
        university_allowed=False,
    ),
    "school": TemplateVariant(
        key="school",
        primary_path="both",
        sections=(
            "profile",
            "top_careers_both",
            "university_recommendations",
            "apprenticeship_overview",
            "next_steps",
            "alternatives",
            "further_training",
        ),
        links=("hochschulkompass", "ausbildung_de", "berufenet"),
        university_allowed=True,
    ),
    "bachelor": TemplateVariant(
        key="bachelor",
        primary_path="postgraduate",
        sections=(
            "profile",
            "top_careers_graduate",
            "master_programs",
            "career_change",
            "next_steps",
            "further_training",
        ),
        links=("hochschulkompass_master", "stepstone"),
        university_allowed=True,
    ),
    "master": TemplateVariant(
        key="master",
        primary_path="postgraduate",
        sections=(
            "profile",
            "top_careers_graduate",
            "doctorate_and_specialisation",
            "career_change",
            "next_steps",
            "further_training",
        ),
        links=("stepstone",),
        university_allowed=True,
    ),
}

GENERIC_VARIANT = TemplateVariant(
    key="generic",
    primary_path="both",
    sections=(
        "profile",
        "top_careers_both",
        "apprenticeship_overview",
        "next_steps",
        "alternatives",
        "further_training",
    ),
    links=("berufenet", "ausbildung_de"),
    university_allowed=True,
)

STUDY_SITUATIONS = {"abitur", "student"}
WORKING_SITUATIONS = {"berufstaetig", "berufstätig", "working", "job"}


def situation_tokens(situation: Any) -> List[str]:
    if situation is None:
        return []
    if isinstance(situation, (list, tuple)):
        parts = [str(s) for s in situation]
    else:
        parts = str(situation).split(",")
    return [p.strip().lower() for p in parts if p and p.strip()]


def _insert_before(sections: Tuple[str, ...], new: str, anchor: str) -> Tuple[str, ...]:
    if new in sections:
        return sections
    out = list(sections)
    idx = out.index(anchor) if anchor in out else len(out)
    out.insert(idx, new)
    return tuple(out)


def select_variant(education: str, situation: Any = None) -> TemplateVariant:
    edu = (education or "").strip().lower()
    tokens = set(situation_tokens(situation))

    variant = EDUCATION_VARIANTS.get(edu)
    if variant is None:
        variant = GENERIC_VARIANT
        if tokens & STUDY_SITUATIONS:
            variant = replace(
                variant,
                sections=_insert_before(variant.sections, "university_recommendations", "apprenticeship_overview"),
                links=("hochschulkompass",) + variant.links,
            )

    if variant.primary_path != "postgraduate" and tokens & WORKING_SITUATIONS:
        variant = replace(variant, sections=_insert_before(variant.sections, "career_change", "next_steps"))

    return variant
