"""Utilities for exporting plans to common formats."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional
from urllib.parse import quote

from plancraft.core.formatting import format_clock, format_long_date
from plancraft.schemas import GoalPlan, PicnicPlan


def _format_dt(dt: datetime) -> str:
    return dt.strftime("%Y%m%dT%H%M%SZ")


def _format_local(dt: datetime) -> str:
    return dt.strftime("%Y%m%dT%H%M%S")


def _escape_ics_text(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace(";", "\\;").replace(",", "\\,")
    escaped = escaped.replace("\n", "\\n")
    return escaped


def _bullets(lines: Iterable[str]) -> List[str]:
    return [f"• {line}" for line in lines]


def _group_label(plan: PicnicPlan) -> str:
    group = plan.group_size
    label = f"{group.adults} adults, {group.kids} kids"
    if group.pets > 0:
        label += f", {group.pets} pets"
    return label


def picnic_plan_to_text(plan: PicnicPlan) -> str:
    """Render the whole picnic plan as a plain-text document."""

    lines: List[str] = [
        f"🧺 PICNIC PLAN - {plan.title}",
        "",
        f"📅 Date: {format_long_date(plan.date)}",
        f"⏰ Time: {format_clock(plan.time)}",
        f"📍 Location: {plan.location}",
        f"⏱️ Duration: {plan.duration} hours",
        f"👥 Group Size: {_group_label(plan)}",
        "",
        "📝 SUMMARY",
        plan.summary,
        "",
        "✅ PACKING CHECKLIST",
    ]
    for item in plan.packing_list:
        line = f"{'🔸' if item.essential else '◦'} {item.name}"
        if item.quantity:
            line += f" ({item.quantity})"
        if item.notes:
            line += f" - {item.notes}"
        lines.append(line)

    lines.extend(["", "🍽️ FOOD & DRINK IDEAS"])
    lines.extend(
        _bullets(
            f"{food.name} - {food.servings} ({food.difficulty}, {food.prep_time})"
            for food in plan.food_suggestions
        )
    )

    lines.extend(["", "🎯 ACTIVITIES"])
    lines.extend(
        _bullets(
            f"{activity.name} - {activity.duration} ({activity.participants})"
            for activity in plan.activities
        )
    )

    lines.extend(["", "📋 SCHEDULE"])
    lines.extend(f"{slot.time_slot} - {slot.activity}: {slot.description}" for slot in plan.schedule)

    lines.extend(["", "🌤️ WEATHER TIPS", *_bullets(plan.weather_tips)])
    lines.extend(["", "🛡️ SAFETY TIPS", *_bullets(plan.safety_tips)])
    lines.extend(["", "🔄 BACKUP PLANS", *_bullets(plan.backup_plans)])

    lines.extend(["", "💰 BUDGET BREAKDOWN", f"Estimated Total: {plan.budget.estimated}"])
    lines.extend(_bullets(f"{line.category}: {line.amount}" for line in plan.budget.breakdown))

    lines.extend(["", f"Created with Plancraft on {plan.created_at.date().isoformat()}"])
    return "\n".join(lines)


def picnic_plan_to_ics(plan: PicnicPlan, *, dtstamp: Optional[datetime] = None) -> str:
    """Serialise the picnic as an iCalendar document with a single event.

    Start and end are floating local times: the picnic happens at the clock
    time entered for its location, whatever the viewer's timezone.
    """

    start_dt = datetime.combine(plan.date, plan.time)
    end_dt = start_dt + timedelta(hours=plan.duration)
    stamp = dtstamp or datetime.now(timezone.utc)
    description = (
        f"{plan.summary}\n\nLocation: {plan.location}\n"
        f"Duration: {plan.duration} hours\nGroup: {plan.group_size.headcount} people"
    )

    lines: List[str] = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Plancraft//Picnic Planner//EN",
        "BEGIN:VEVENT",
        f"UID:{plan.id}@plancraft.app",
        f"DTSTAMP:{_format_dt(stamp)}",
        f"DTSTART:{_format_local(start_dt)}",
        f"DTEND:{_format_local(end_dt)}",
        f"SUMMARY:{_escape_ics_text(plan.title)}",
        f"DESCRIPTION:{_escape_ics_text(description)}",
        f"LOCATION:{_escape_ics_text(plan.location)}",
        "END:VEVENT",
        "END:VCALENDAR",
    ]
    return "\r\n".join(lines) + "\r\n"


def picnic_share_message(plan: PicnicPlan) -> str:
    """Short chat-friendly digest of the plan."""

    group = f"{plan.group_size.headcount} people"
    if plan.group_size.pets > 0:
        group += f" + {plan.group_size.pets} pets"

    essentials = [item for item in plan.packing_list if item.essential][:8]
    lines: List[str] = [
        f"🧺 *{plan.title}*",
        "",
        f"📅 *Date:* {format_long_date(plan.date)}",
        f"⏰ *Time:* {format_clock(plan.time)}",
        f"📍 *Location:* {plan.location}",
        f"👥 *Group:* {group}",
        f"⏱️ *Duration:* {plan.duration} hours",
        "",
        "📝 *Summary:*",
        plan.summary,
        "",
        "✅ *Essential Items to Bring:*",
        *_bullets(f"{item.name} ({item.quantity})" if item.quantity else item.name for item in essentials),
        "",
        "🍽️ *Food Ideas:*",
        *_bullets(f"{food.name} - {food.servings}" for food in plan.food_suggestions[:5]),
        "",
        "🎯 *Activities:*",
        *_bullets(f"{activity.name} ({activity.duration})" for activity in plan.activities[:4]),
        "",
        f"💰 *Estimated Budget:* {plan.budget.estimated}",
        "",
        "🌤️ *Weather Tips:*",
        *_bullets(plan.weather_tips[:3]),
        "",
        "Let's make this picnic amazing! 🌟",
        "",
        "_Created with Plancraft_",
    ]
    return "\n".join(lines)


def whatsapp_share_url(plan: PicnicPlan) -> str:
    return f"https://wa.me/?text={quote(picnic_share_message(plan), safe='')}"


def goal_plan_to_text(plan: GoalPlan) -> str:
    """Render a goal plan, ticking off completed actions."""

    lines: List[str] = [
        plan.title,
        f"Goal: {plan.goal}",
        f"Duration: {plan.total_duration} ({plan.total_days} days)",
        "",
        plan.summary,
    ]
    for number, phase in enumerate(plan.phases, start=1):
        lines.extend(
            [
                "",
                f"PHASE {number}: {phase.title}",
                f"{phase.start_date.isoformat()} to {phase.end_date.isoformat()}",
                phase.description,
            ]
        )
        for action in phase.actions:
            mark = "[x]" if action.completed else "[ ]"
            lines.append(f"  {mark} {action.title} ({action.duration}, {action.priority} priority)")
        lines.append(f"  Milestone: {phase.milestone}")
        if phase.resources:
            lines.append(f"  Resources: {', '.join(phase.resources)}")

    lines.extend(["", "RESOURCES", *_bullets(plan.resources)])
    lines.extend(["", "CHECKPOINTS", *_bullets(plan.checkpoints)])
    lines.extend(["", "TIPS", *_bullets(plan.tips)])
    return "\n".join(lines)


__all__ = [
    "goal_plan_to_text",
    "picnic_plan_to_ics",
    "picnic_plan_to_text",
    "picnic_share_message",
    "whatsapp_share_url",
]
