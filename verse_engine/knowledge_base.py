"""
knowledge_base.py
=================
Curated fallback verse sets, keyed by topic keywords.

Used whenever the language model cannot be called or its reply cannot be
parsed.  Matching is an ordered rule list evaluated against the lower-cased
topic; the first entry with a keyword contained in the topic wins, otherwise
the default entry (scripture in general) is returned.

Each entry stores:
  name      — category label (used in logs and the health probe)
  keywords  — substrings tested against the lower-cased topic
  verses    — exactly three Verse records, in display order

Verse texts are quoted from the NIV.
"""

from __future__ import annotations

from typing import List, NamedTuple, Tuple

from verse_engine.models import Verse

# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------

class KnowledgeEntry(NamedTuple):
    name: str
    keywords: Tuple[str, ...]
    verses: Tuple[Verse, ...]

    def matches(self, lowered_topic: str) -> bool:
        return any(keyword in lowered_topic for keyword in self.keywords)


# ---------------------------------------------------------------------------
# Category rules, in priority order
# ---------------------------------------------------------------------------

_LOVE = KnowledgeEntry(
    "love",
    ("love", "compassion"),
    (
        Verse(
            reference   = "John 3:16",
            text        = "For God so loved the world that he gave his one and only Son, that whoever "
                          "believes in him shall not perish but have eternal life.",
            explanation = "This verse demonstrates the concept of sacrificial love and is often studied "
                          "in educational contexts about religious expressions of love.",
        ),
        Verse(
            reference   = "1 Corinthians 13:4-7",
            text        = "Love is patient, love is kind. It does not envy, it does not boast, it is not "
                          "proud. It does not dishonor others, it is not self-seeking, it is not easily "
                          "angered, it keeps no record of wrongs. Love does not delight in evil but "
                          "rejoices with the truth. It always protects, always trusts, always hopes, "
                          "always perseveres.",
            explanation = "This passage is frequently studied in educational settings as it provides a "
                          "comprehensive definition of love from a biblical perspective.",
        ),
        Verse(
            reference   = "1 John 4:19",
            text        = "We love because he first loved us.",
            explanation = "This verse is studied to understand the theological concept that divine love "
                          "precedes and enables human love.",
        ),
    ),
)

_FORGIVENESS = KnowledgeEntry(
    "forgiveness",
    ("forgive", "forgiveness"),
    (
        Verse(
            reference   = "Matthew 6:14-15",
            text        = "For if you forgive other people when they sin against you, your heavenly "
                          "Father will also forgive you. But if you do not forgive others their sins, "
                          "your Father will not forgive your sins.",
            explanation = "This verse from the Sermon on the Mount is studied to understand the "
                          "reciprocal nature of forgiveness in biblical teaching.",
        ),
        Verse(
            reference   = "Colossians 3:13",
            text        = "Bear with each other and forgive one another if any of you has a grievance "
                          "against someone. Forgive as the Lord forgave you.",
            explanation = "This verse is examined in educational contexts to understand how forgiveness "
                          "is modeled after divine forgiveness in Christian theology.",
        ),
        Verse(
            reference   = "Ephesians 4:32",
            text        = "Be kind and compassionate to one another, forgiving each other, just as in "
                          "Christ God forgave you.",
            explanation = "This verse is studied to understand the connection between compassion and "
                          "forgiveness in religious ethical teachings.",
        ),
    ),
)

_FAITH = KnowledgeEntry(
    "faith",
    ("faith", "trust", "belief"),
    (
        Verse(
            reference   = "Hebrews 11:1",
            text        = "Now faith is confidence in what we hope for and assurance about what we do "
                          "not see.",
            explanation = "This verse is often studied in educational contexts as it provides a "
                          "definition of faith from a biblical perspective.",
        ),
        Verse(
            reference   = "Romans 10:17",
            text        = "Consequently, faith comes from hearing the message, and the message is heard "
                          "through the word about Christ.",
            explanation = "This verse is examined to understand the development of faith in religious "
                          "educational contexts.",
        ),
        Verse(
            reference   = "James 2:26",
            text        = "As the body without the spirit is dead, so faith without deeds is dead.",
            explanation = "This verse is studied to understand the relationship between faith and action "
                          "in religious ethical teachings.",
        ),
    ),
)

_HOPE = KnowledgeEntry(
    "hope",
    ("hope", "perseverance", "endurance"),
    (
        Verse(
            reference   = "Romans 5:3-5",
            text        = "Not only so, but we also glory in our sufferings, because we know that "
                          "suffering produces perseverance; perseverance, character; and character, hope. "
                          "And hope does not put us to shame, because God's love has been poured out into "
                          "our hearts through the Holy Spirit, who has been given to us.",
            explanation = "This passage is studied to understand the development of hope through "
                          "adversity in religious contexts.",
        ),
        Verse(
            reference   = "Hebrews 10:23",
            text        = "Let us hold unswervingly to the hope we profess, for he who promised is "
                          "faithful.",
            explanation = "This verse is examined in educational settings to understand the concept of "
                          "hope based on divine faithfulness.",
        ),
        Verse(
            reference   = "Romans 15:13",
            text        = "May the God of hope fill you with all joy and peace as you trust in him, so "
                          "that you may overflow with hope by the power of the Holy Spirit.",
            explanation = "This verse is studied to understand the source of hope in Christian theology.",
        ),
    ),
)

_WISDOM = KnowledgeEntry(
    "wisdom",
    ("wisdom", "knowledge"),
    (
        Verse(
            reference   = "Proverbs 1:7",
            text        = "The fear of the LORD is the beginning of knowledge, but fools despise wisdom "
                          "and instruction.",
            explanation = "This verse is studied in educational contexts to understand the biblical "
                          "foundation of wisdom and knowledge.",
        ),
        Verse(
            reference   = "James 1:5",
            text        = "If any of you lacks wisdom, you should ask God, who gives generously to all "
                          "without finding fault, and it will be given to you.",
            explanation = "This verse is examined to understand the source of wisdom in biblical teaching.",
        ),
        Verse(
            reference   = "Proverbs 3:13-14",
            text        = "Blessed are those who find wisdom, those who gain understanding, for she is "
                          "more profitable than silver and yields better returns than gold.",
            explanation = "This passage is studied to understand the value placed on wisdom in biblical "
                          "literature.",
        ),
    ),
)

DEFAULT_ENTRY = KnowledgeEntry(
    "scripture",
    (),
    (
        Verse(
            reference   = "Psalm 119:105",
            text        = "Your word is a lamp for my feet, a light on my path.",
            explanation = "This verse is studied in educational contexts to understand the role of "
                          "scripture as guidance in religious traditions.",
        ),
        Verse(
            reference   = "2 Timothy 3:16-17",
            text        = "All Scripture is God-breathed and is useful for teaching, rebuking, correcting "
                          "and training in righteousness, so that the servant of God may be thoroughly "
                          "equipped for every good work.",
            explanation = "This passage is examined in religious education to understand the purpose and "
                          "authority of scripture.",
        ),
        Verse(
            reference   = "Joshua 1:8",
            text        = "Keep this Book of the Law always on your lips; meditate on it day and night, so "
                          "that you may be careful to do everything written in it. Then you will be "
                          "prosperous and successful.",
            explanation = "This verse is studied to understand the importance of scripture meditation in "
                          "religious practice.",
        ),
    ),
)

# First match wins: "hope and love" resolves to love.
KNOWLEDGE_RULES: Tuple[KnowledgeEntry, ...] = (
    _LOVE,
    _FORGIVENESS,
    _FAITH,
    _HOPE,
    _WISDOM,
)

# Category labels in priority order, default last
CATEGORY_NAMES = [entry.name for entry in KNOWLEDGE_RULES] + [DEFAULT_ENTRY.name]


# ---------------------------------------------------------------------------
# Starter topics offered to UI consumers
# ---------------------------------------------------------------------------

class ExampleTopic(NamedTuple):
    title: str
    content: str


EXAMPLE_TOPICS: Tuple[ExampleTopic, ...] = (
    ExampleTopic("Love",        "The concept of love in biblical teachings"),
    ExampleTopic("Wisdom",      "Biblical perspectives on wisdom and knowledge"),
    ExampleTopic("Faith",       "The nature and importance of faith"),
    ExampleTopic("Forgiveness", "Teachings about forgiveness and reconciliation"),
    ExampleTopic("Hope",        "Biblical understanding of hope and perseverance"),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def _match(topic: str) -> KnowledgeEntry:
    lowered = str(topic).lower()
    for entry in KNOWLEDGE_RULES:
        if entry.matches(lowered):
            return entry
    return DEFAULT_ENTRY


def category_for(topic: str) -> str:
    """Name of the knowledge entry *topic* resolves to."""
    return _match(topic).name


def lookup(topic: str) -> List[Verse]:
    """Return the three fallback verses for *topic*. Total; never empty."""
    return list(_match(topic).verses)
