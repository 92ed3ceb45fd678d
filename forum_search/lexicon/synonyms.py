"""
Manual synonym table for query expansion.

Fast, deterministic fallback that is always applied, whether or not the
external lexical database answers in time. Keys are corrected (vocabulary)
words; values are ordered so expansion output is stable.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

MANUAL_SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "rules": ("regulations", "directives", "guidelines", "policies", "standards", "laws", "norms",
              "principles", "code", "requirements", "bylaws", "ordinances", "mandate", "protocol"),
    "regulations": ("rules", "directives", "guidelines", "policies", "laws", "ordinances"),
    "directives": ("rules", "regulations", "guidelines", "orders", "instructions"),
    "guidelines": ("rules", "regulations", "directives", "standards", "protocols"),
    "policies": ("rules", "regulations", "guidelines", "procedures", "protocols"),

    "classroom": ("class", "room", "lecture", "hall", "course", "lectureroom", "auditorium"),
    "class": ("classroom", "course", "lecture", "lesson", "session"),

    "hostel": ("dormitory", "dorm", "residence", "accommodation", "lodging", "housing", "quarters"),
    "dormitory": ("hostel", "dorm", "residence", "housing"),
    "dorm": ("dormitory", "hostel", "residence"),

    "society": ("community", "association", "organization", "group", "club", "collective"),
    "community": ("society", "group", "association", "collective"),

    "problem": ("issue", "trouble", "difficulty", "challenge", "concern", "matter"),
    "issue": ("problem", "trouble", "matter", "concern"),
    "solution": ("fix", "answer", "resolution", "workaround", "remedy", "cure"),
    "fix": ("solution", "repair", "remedy", "resolve"),
    "error": ("mistake", "bug", "glitch", "fault", "defect", "flaw"),
    "help": ("assist", "support", "aid", "guide", "advise"),
    "question": ("query", "inquiry", "ask", "doubt", "request"),
})
