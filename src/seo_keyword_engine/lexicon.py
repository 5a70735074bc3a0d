"""
Static word tables shared by the analyzer and the insertion engine.

All tables are built once at import time and never mutated.
"""

# Function words ignored by phrase extraction and topical-repetition counts
STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "being", "have",
    "has", "had", "do", "does", "did", "will", "would", "could", "should",
    "may", "might", "can", "this", "that", "these", "those", "i", "you", "he",
    "she", "it", "we", "they", "me", "him", "her", "us", "them", "my", "your",
    "his", "its", "our", "their", "mine", "yours", "ours", "theirs", "what",
    "which", "who", "when", "where", "why", "how", "all", "any", "both",
    "each", "few", "more", "most", "other", "some", "such", "no", "nor",
    "not", "only", "own", "same", "so", "than", "too", "very", "just", "now",
    "also", "then", "first", "get", "make", "go", "see", "come", "take",
    "know", "time", "year", "work", "well", "way", "day", "man", "new",
    "want", "use", "good", "look", "right", "old", "still", "big", "great",
    "long", "say", "here", "out", "up", "about", "into", "over", "think",
    "there", "from", "because", "while", "after", "before", "during",
    "through", "between", "under", "again", "further", "once",
    "whom", "whose", "if", "as", "until", "against", "above", "below",
    "off", "down", "am", "shall", "must", "ought", "yet", "every", "many",
    "much", "even", "really", "like", "often", "always", "never",
})

# Generic verbs that make extracted phrases useless as keywords
GENERIC_VERBS = frozenset({
    "will", "get", "gets", "getting", "got", "make", "makes", "making", "made",
})

# Fallback suggestions when the content yields nothing usable
GENERIC_KEYWORDS = (
    "content optimization",
    "SEO strategy",
    "digital marketing",
    "online presence",
    "search visibility",
)

# Trigger words -> contextual keyword phrases for the phrase extractor
CONTEXTUAL_TOPICS = (
    (("software", "digital", "technology"), ("digital solutions", "technology innovation")),
    (("business", "company", "management"), ("business strategy", "growth opportunities")),
    (("health", "fitness", "nutrition"), ("healthy lifestyle", "wellness solutions")),
    (("learn", "education", "training"), ("learning experience", "educational resources")),
    (("marketing", "brand", "customer"), ("brand awareness", "customer engagement")),
)

# Topic -> related terms used for sentence affinity during insertion
TOPIC_RELATED_TERMS = {
    "business": ("company", "strategy", "management", "professional", "corporate", "enterprise"),
    "technology": ("digital", "innovation", "software", "tech", "solution", "system"),
    "marketing": ("brand", "advertising", "promotion", "campaign", "content", "audience"),
    "health": ("wellness", "medical", "fitness", "nutrition", "healthcare", "treatment"),
    "education": ("learning", "teaching", "training", "knowledge", "skill", "academic"),
    "finance": ("money", "investment", "financial", "banking", "economic", "revenue"),
}

TRANSITION_WORDS = frozenset({
    "however", "moreover", "furthermore", "additionally", "therefore",
    "consequently", "meanwhile",
})

# Readability also rewards these softer connectives
READABILITY_TRANSITIONS = TRANSITION_WORDS | {"similarly", "likewise"}

COORDINATING_CONJUNCTIONS = frozenset({"and", "or", "but", "yet", "so"})

SUBORDINATING_WORDS = frozenset({
    "which", "that", "who", "where", "when", "because", "since", "while", "although",
})

RELATIVE_PRONOUNS = frozenset({"which", "that", "who", "where"})

DETERMINERS = frozenset({
    "the", "a", "an", "this", "that", "these", "those", "his", "her", "its",
    "our", "their",
})

# Words after which an article would be redundant
ARTICLE_BLOCKERS = DETERMINERS | {"my", "your"}

# Words before which an article reads badly
ARTICLE_BLOCKERS_AFTER = frozenset({"is", "are", "was", "were", "and", "or", "but"})

ACTION_VERBS = frozenset({
    "provides", "offers", "includes", "features", "supports", "delivers",
    "ensures", "creates", "builds", "develops",
})

PREPOSITIONS = frozenset({"for", "with", "through", "via", "using"})

EMPHASIS_ADJECTIVES = frozenset({
    "important", "essential", "crucial", "vital", "key", "major", "significant",
})

# Minimal stop list for judging whether a preceding word carries meaning
SPLICE_STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by",
})

NOUN_SUFFIXES = ("tion", "sion", "ment", "ness", "ity", "ty", "er", "or", "ist", "ism")
NON_NOUN_SUFFIXES = ("ing", "ed", "ly")

DISCOURSE_MARKERS = (
    "especially", "particularly", "specifically", "generally", "after",
    "before", "during",
)
