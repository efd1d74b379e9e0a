"""Prompt Composer - builds the system and user instructions for a request."""

from __future__ import annotations

from dataclasses import dataclass, field

from resumancer.models.idea import CATEGORIES, Category
from resumancer.models.mood import MoodProfile
from resumancer.models.request import Constraints, GenerationRequest
from resumancer.pipeline.mood_profile import locked_category

IDEA_FIELDS = ("category", "title", "why", "plan", "opener", "suggested_timeframe")

SYSTEM_PROMPT = """\
You are a careers strategist who turns a job seeker's situation into concrete, \
shareable career moves. Respond ONLY with JSON matching:
{{"ideas":[{{"category":{categories},"title":string,"why":string,"plan":string,"opener":string,"suggested_timeframe":string}}, ...]}}

Rules:
- Exactly 3 ideas.
- {category_rule}
- Every idea must produce a concrete, shareable artifact (portfolio piece, demo, \
dashboard, case study, template, talk, etc.).
- Name plausible tools or platforms the person would actually use.
- Name the distribution channel where the artifact gets seen (LinkedIn post, \
GitHub, a community, a newsletter, a meetup, direct outreach, etc.).
- Include exactly one measurable success metric in each idea.
- "why" explains in 1-2 sentences why the idea fits this person.
- "plan" is 4 to 8 short steps, each step on its own line separated by \\n, \
fitting within {time_horizon}.
- "opener" is a single DM-style outreach sentence the person could send today.
- "suggested_timeframe" is a short duration no longer than {time_horizon}.
- Respect every constraint the user lists.
- Never reuse a title from the user's "Do NOT repeat" list, and do not paraphrase them.
- Tailor to the user details; keep it specific and useful."""

DIVERSE_RULE = 'One idea per category: one "practical", one "creative", one "absurd".'
LOCKED_RULE = 'All 3 ideas use category "{category}"; make them clearly different from each other.'


@dataclass
class ComposedPrompt:
    """Instructions and output contract for one model call."""

    system: str
    user: str
    schema: dict = field(default_factory=dict)
    target_category: Category | None = None


def build_ideas_schema(allowed: tuple[str, ...] = CATEGORIES) -> dict:
    """Strict output schema: an object holding exactly three ideas."""
    idea = {
        "type": "object",
        "properties": {name: {"type": "string"} for name in IDEA_FIELDS},
        "required": list(IDEA_FIELDS),
        "additionalProperties": False,
    }
    idea["properties"]["category"] = {"type": "string", "enum": list(allowed)}
    return {
        "type": "object",
        "properties": {
            "ideas": {"type": "array", "items": idea, "minItems": 3, "maxItems": 3},
        },
        "required": ["ideas"],
        "additionalProperties": False,
    }


def format_constraints(constraints: Constraints | str | None) -> list[str]:
    """Turn structured or free-text constraints into prompt lines."""
    if constraints is None:
        return []
    if isinstance(constraints, str):
        text = constraints.strip()
        return [text] if text else []

    lines = []
    if constraints.remote_only:
        lines.append("Remote-only: every idea must be doable fully remotely.")
    if constraints.no_coding:
        lines.append("No coding: use no-code or low-code tools only.")
    if constraints.part_time_ok:
        lines.append("Part-time: ideas must fit alongside a part-time schedule.")
    if constraints.max_budget.strip():
        lines.append(f"Budget ceiling: spend no more than {constraints.max_budget.strip()}.")
    if constraints.notes.strip():
        lines.append(constraints.notes.strip())
    return lines


def _bullets(items: list[str], empty: str = "(none given)") -> str:
    if not items:
        return empty
    return "\n".join(f"- {item}" for item in items)


def compose_prompt(
    request: GenerationRequest,
    profile: MoodProfile,
    *,
    category_mode: str = "diverse",
    novelty_seed: str | int | float | None = None,
) -> ComposedPrompt:
    """Build the (system, user) instruction pair for a generation request."""
    if category_mode == "locked":
        target = locked_category(profile.mood)
        category_rule = LOCKED_RULE.format(category=target)
        categories = f'"{target}"'
        schema = build_ideas_schema((target,))
    else:
        target = None
        category_rule = DIVERSE_RULE
        categories = "|".join(f'"{c}"' for c in CATEGORIES)
        schema = build_ideas_schema()

    system = SYSTEM_PROMPT.format(
        categories=categories,
        category_rule=category_rule,
        time_horizon=request.time_horizon,
    )

    seed = novelty_seed if novelty_seed is not None else request.novelty_seed
    weights = profile.weights
    constraint_lines = format_constraints(request.constraints)

    sections = [
        "## About me",
        f"Background: {request.background or '(not given)'}",
        f"Target role: {request.target_role or '(open)'}",
        f"Industry: {request.industry or '(open)'}",
        f"Skills:\n{_bullets(request.skills)}",
        f"Interests:\n{_bullets(request.interests)}",
    ]
    if request.additional_context.strip():
        sections.append(f"Additional context: {request.additional_context.strip()}")

    sections += [
        "",
        "## Mood",
        f"Mood: {profile.mood}/10 ({profile.label})",
        f"Scope: {profile.scope}",
        f"Budget: {profile.budget}",
        f"Risk: {profile.risk}",
        (
            "Category mix to lean toward: "
            f"practical {weights.practical:.0%}, "
            f"creative {weights.creative:.0%}, "
            f"absurd {weights.absurd:.0%}"
        ),
        f"Time horizon: {request.time_horizon}",
    ]

    if constraint_lines:
        sections += ["", "## Constraints", _bullets(constraint_lines)]

    if request.previous_titles:
        sections += [
            "",
            "## Do NOT repeat these titles (already suggested)",
            _bullets(request.previous_titles),
        ]

    if seed is not None and str(seed).strip():
        sections += [
            "",
            f"Novelty seed: {seed} (use it to pick fresh angles; do not echo it back)",
        ]

    sections += ["", "Respond with JSON only."]

    return ComposedPrompt(
        system=system,
        user="\n".join(sections),
        schema=schema,
        target_category=target,
    )
