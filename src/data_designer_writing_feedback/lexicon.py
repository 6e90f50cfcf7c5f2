# Word and phrase lists shared by the rule and mode analyzers.
#
# Everything here is read-only data loaded once at import time. Mappings are
# wrapped in MappingProxyType so analyzers cannot mutate them by accident.

from __future__ import annotations

from types import MappingProxyType

# ---------------------------------------------------------------------------
# Standard analyzers
# ---------------------------------------------------------------------------

# Words ending in -ly that are not adverbs.
ADVERB_EXCEPTIONS = frozenset({
    "ally", "anomaly", "apply", "assembly", "belly", "bully",
    "butterfly", "chilly", "comply", "costly", "courtly", "cuddly", "curly",
    "daily", "dally", "deadly", "dolly", "early", "elderly", "family",
    "firefly", "fly", "folly", "friendly", "ghastly", "gully", "hilly",
    "holly", "holy", "homely", "hourly", "imply", "italy", "jelly", "jolly",
    "july", "likely", "lily", "lively", "lonely", "lovely",
    "manly", "melancholy", "monopoly", "monthly", "multiply", "nightly",
    "oily", "only", "orderly", "panoply", "poly", "quarterly", "rally",
    "reply", "rely", "sally", "scaly", "silly", "sly", "smelly", "supply",
    "surly", "tally", "timely", "ugly", "unlikely", "weekly", "wily",
    "wobbly", "wooly", "woolly", "yearly",
})

COMPLEX_WORDS = MappingProxyType({
    "a number of": "many, some",
    "abundance": "enough, plenty",
    "accede to": "allow, agree to",
    "accelerate": "speed up",
    "accentuate": "stress",
    "accompany": "go with, with",
    "accomplish": "do",
    "accorded": "given",
    "accrue": "add, gain",
    "acquiesce": "agree",
    "acquire": "get",
    "additional": "more, extra",
    "adjacent to": "next to",
    "adjustment": "change",
    "admissible": "allowed, accepted",
    "advantageous": "helpful",
    "adversely impact": "hurt",
    "advise": "tell",
    "aforementioned": "remove",
    "aggregate": "total, add",
    "aircraft": "plane",
    "all of": "all",
    "alleviate": "ease, reduce",
    "allocate": "divide",
    "along the lines of": "like, as in",
    "already existing": "existing",
    "alternatively": "or",
    "ameliorate": "improve, help",
    "anticipate": "expect",
    "apparent": "clear, plain",
    "appreciable": "many",
    "as a means of": "to",
    "as of yet": "yet",
    "as to": "on, about",
    "as yet": "yet",
    "ascertain": "find out, learn",
    "assist": "help",
    "at this time": "now",
    "attain": "meet",
    "attributable to": "because",
    "authorize": "allow, let",
    "because of the fact that": "because",
    "belated": "late",
    "benefit from": "enjoy",
    "bestow": "give, award",
    "by virtue of": "by, under",
    "cease": "stop",
    "close proximity": "near",
    "commence": "begin or start",
    "comply with": "follow",
    "concerning": "about, on",
    "consequently": "so",
    "consolidate": "join, merge",
    "constitutes": "is, forms, makes up",
    "demonstrate": "prove, show",
    "depart": "leave, go",
    "designate": "choose, name",
    "discontinue": "drop, stop",
    "due to the fact that": "because, since",
    "each and every": "each",
    "economical": "cheap",
    "eliminate": "cut, drop, end",
    "elucidate": "explain",
    "employ": "use",
    "endeavor": "try",
    "enumerate": "count",
    "equitable": "fair",
    "equivalent": "equal",
    "evaluate": "test, check",
    "evidenced": "showed",
    "exclusively": "only",
    "expedite": "hurry",
    "expend": "spend",
    "expiration": "end",
    "facilitate": "ease, help",
    "factual evidence": "facts, evidence",
    "feasible": "workable",
    "finalize": "complete, finish",
    "first and foremost": "first",
    "for the purpose of": "to",
    "forfeit": "lose, give up",
    "formulate": "plan",
    "honest truth": "truth",
    "however": "but, yet",
    "if and when": "if, when",
    "impacted": "affected, harmed, changed",
    "implement": "install, put in place, tool",
    "in a timely manner": "on time",
    "in accordance with": "by, under",
    "in addition": "also, besides, too",
    "in all likelihood": "probably",
    "in an effort to": "to",
    "in between": "between",
    "in excess of": "more than",
    "in lieu of": "instead",
    "in light of the fact that": "because",
    "in many cases": "often",
    "in order to": "to",
    "in regard to": "about, concerning, on",
    "in some instances": "sometimes",
    "in terms of": "as, for, with",
    "in the near future": "soon",
    "in the process of": "(omit)",
    "inception": "start",
    "incumbent upon": "must",
    "indicate": "say, state, or show",
    "indication": "sign",
    "initiate": "start",
    "is applicable to": "applies to",
    "is authorized to": "may",
    "is responsible for": "handles",
    "it is essential": "must, need to",
    "magnitude": "size",
    "maximum": "greatest, largest, most",
    "methodology": "method",
    "minimize": "cut",
    "minimum": "least, smallest, small",
    "modify": "change",
    "monitor": "check, watch, track",
    "multiple": "many",
    "necessitate": "cause, need",
    "nevertheless": "still, besides, even so",
    "not certain": "uncertain",
    "not many": "few",
    "not often": "rarely",
    "not unless": "only if",
    "not unlike": "similar, alike",
    "notwithstanding": "in spite of, still",
    "null and void": "use either null or void",
    "numerous": "many",
    "objective": "aim, goal",
    "obligate": "bind, compel",
    "obtain": "get",
    "on the contrary": "but, so",
    "on the other hand": "but, so",
    "one particular": "one",
    "optimum": "best, greatest, most",
    "owing to the fact that": "because, since",
    "participate": "take part",
    "particulars": "details",
    "pass away": "die",
    "pertaining to": "about, of, on",
    "point in time": "time, point, moment, now",
    "portion": "part",
    "possess": "have, own",
    "preclude": "prevent",
    "previously": "before",
    "prior to": "before",
    "prioritize": "rank, focus on",
    "procure": "buy, get",
    "proficiency": "skill",
    "provided that": "if",
    "purchase": "buy, sale",
    "readily apparent": "clear",
    "refer back": "refer",
    "regarding": "about, of, on",
    "relocate": "move",
    "remainder": "rest",
    "remuneration": "payment",
    "require": "must, need",
    "requirement": "need, rule",
    "reside": "live",
    "residence": "house",
    "retain": "keep",
    "satisfy": "meet, please",
    "shall": "must, will",
    "should you wish": "if you want",
    "similar to": "like",
    "solicit": "ask for, request",
    "span across": "span, cross",
    "strategize": "plan",
    "subsequent": "later, next, after, then",
    "substantial": "large, much",
    "successfully complete": "complete, pass",
    "sufficient": "enough",
    "terminate": "end, stop",
    "the month of": "(omit)",
    "therefore": "thus, so",
    "this day and age": "today",
    "time period": "time, period",
    "transmit": "send",
    "transpire": "happen",
    "until such time as": "until",
    "utilization": "use",
    "utilize": "use",
    "validate": "confirm",
    "various different": "various, different",
    "whether or not": "whether",
    "with respect to": "on, about",
    "with the exception of": "except for",
    "witnessed": "saw, seen",
})

QUALIFIERS = (
    "i believe",
    "i consider",
    "i don't believe",
    "i don't consider",
    "i don't feel",
    "i don't suggest",
    "i don't think",
    "i feel",
    "i hope to",
    "i might",
    "i suggest",
    "i think",
    "i was wondering",
    "i will try",
    "i wonder",
    "in my opinion",
    "is kind of",
    "is sort of",
    "just",
    "maybe",
    "perhaps",
    "possibly",
    "we believe",
    "we consider",
    "we don't believe",
    "we don't consider",
    "we don't feel",
    "we don't suggest",
    "we don't think",
    "we feel",
    "we hope to",
    "we might",
    "we suggest",
    "we think",
    "we were wondering",
    "we will try",
    "we wonder",
)

HELPING_VERBS = ("is", "are", "was", "were", "be", "been", "being")

EXPANDED_HELPING_VERBS = frozenset({
    "is", "are", "was", "were", "be", "been", "being", "am",
    "will", "would", "could", "should", "might", "may", "must",
    "have", "has", "had",
})

# Short adverbs that may sit between a helping verb and its participle.
PASSIVE_INTERVENERS = frozenset({
    "not", "never", "also", "just", "already", "always", "still", "often",
    "soon", "then", "once", "almost", "even", "ever", "well", "now",
})

IRREGULAR_PARTICIPLES = frozenset({
    "arisen", "awoken", "beaten", "become", "begun", "bent", "bet", "bitten",
    "blown", "born", "borne", "bound", "bred", "brought", "broken", "built",
    "burnt", "bought", "caught", "chosen", "come", "cut", "dealt", "done",
    "drawn", "dreamt", "driven", "drunk", "dug", "eaten", "fallen", "fed",
    "felt", "fought", "found", "fled", "flung", "flown", "forbidden",
    "forgiven", "forgotten", "frozen", "given", "gone", "ground", "grown",
    "hung", "heard", "hidden", "hit", "held", "hurt", "kept", "known",
    "laid", "led", "left", "lent", "let", "lit", "lost", "made", "meant",
    "met", "mistaken", "overtaken", "paid", "put", "quit", "read", "ridden",
    "rung", "risen", "run", "said", "seen", "sought", "sold", "sent", "set",
    "sewn", "shaken", "shed", "shot", "shown", "shut", "sung", "sunk",
    "sat", "slain", "slid", "slung", "sown", "spoken", "sped", "spent",
    "spun", "spread", "sprung", "stolen", "stuck", "stung", "struck",
    "sworn", "swept", "swum", "taken", "taught", "torn", "told", "thought",
    "thrown", "undertaken", "understood", "upset", "woken", "worn", "woven",
    "wept", "won", "wound", "withdrawn", "written",
})

# ---------------------------------------------------------------------------
# Brevity mode
# ---------------------------------------------------------------------------

WORDY_PHRASES = MappingProxyType({
    "in order to": "to",
    "due to the fact that": "because",
    "at this point in time": "now",
    "in the event of": "if",
    "with regard to": "about",
    "in accordance with": "under",
    "prior to": "before",
    "on receipt": "when we get",
    "should you wish": "if you want",
    "in respect of": "for",
    "in excess of": "more than",
    "with the exception of": "except",
    "for the purpose of": "to",
    "in spite of the fact that": "although",
    "until such time as": "until",
    "during the course of": "during",
    "in the near future": "soon",
    "at the present time": "now",
    "in view of the fact that": "because",
    "on the grounds that": "because",
})

REDUNDANT_PHRASES = MappingProxyType({
    "advance planning": "planning",
    "basic fundamentals": "fundamentals",
    "completely eliminate": "eliminate",
    "end result": "result",
    "final outcome": "outcome",
    "future plans": "plans",
    "past history": "history",
    "repeat again": "repeat",
    "absolutely essential": "essential",
    "totally unique": "unique",
    "general consensus": "consensus",
    "personal opinion": "opinion",
    "brief summary": "summary",
    "exact same": "same",
    "close proximity": "proximity",
    "each individual": "each",
    "first priority": "priority",
    "serious crisis": "crisis",
    "true facts": "facts",
    "unexpected surprise": "surprise",
})

FILLER_WORDS = (
    "really", "very", "quite", "rather", "somewhat", "actually",
    "basically", "literally", "obviously", "certainly", "definitely",
    "absolutely", "totally", "completely", "entirely", "extremely",
    "incredibly", "remarkably", "particularly", "especially",
)

WEAK_QUALIFIERS = (
    "kind of", "sort of", "a bit", "a little", "somewhat", "fairly",
    "pretty much", "more or less", "I think", "I believe", "I feel",
    "it seems", "appears to be", "tends to", "might be",
)

# ---------------------------------------------------------------------------
# Conversational mode
# ---------------------------------------------------------------------------

CONTRACTION_MAP = MappingProxyType({
    "do not": "don't",
    "will not": "won't",
    "cannot": "can't",
    "should not": "shouldn't",
    "would not": "wouldn't",
    "could not": "couldn't",
    "have not": "haven't",
    "has not": "hasn't",
    "had not": "hadn't",
    "is not": "isn't",
    "are not": "aren't",
    "was not": "wasn't",
    "were not": "weren't",
    "does not": "doesn't",
    "did not": "didn't",
    "it is": "it's",
    "it has": "it's",
    "they are": "they're",
    "they have": "they've",
    "we are": "we're",
    "we have": "we've",
    "you are": "you're",
    "you have": "you've",
    "I am": "I'm",
    "I have": "I've",
    "I will": "I'll",
    "you will": "you'll",
    "we will": "we'll",
    "they will": "they'll",
})

FORMAL_WORDS = MappingProxyType({
    "commence": "start",
    "terminate": "end",
    "utilize": "use",
    "facilitate": "help",
    "demonstrate": "show",
    "subsequently": "then",
    "aforementioned": "this",
    "endeavor": "try",
    "purchase": "buy",
    "assist": "help",
    "advise": "tell",
    "regarding": "about",
    "concerning": "about",
    "pertaining": "about",
    "additional": "extra",
    "numerous": "many",
    "obtain": "get",
    "acquire": "get",
    "possess": "have",
    "residence": "home",
    "automobile": "car",
    "beverage": "drink",
    "employment": "job",
    "sufficient": "enough",
    "remainder": "rest",
    "individuals": "people",
    "persons": "people",
    "construct": "build",
    "establish": "set up",
    "indicate": "show",
    "require": "need",
    "accomplish": "do",
    "attempt": "try",
    "component": "part",
    "participate": "take part",
    "implement": "carry out",
})

IMPERSONAL_PHRASES = MappingProxyType({
    "the user": "you",
    "the customer": "you",
    "the applicant": "you",
    "the client": "you",
    "the individual": "you",
    "one should": "you should",
    "one must": "you must",
    "one can": "you can",
    "it is recommended": "we recommend",
    "it is suggested": "we suggest",
    "individuals must": "you must",
    "persons should": "you should",
    "users need to": "you need to",
    "customers should": "you should",
    "people need to": "you need to",
})

COMPLEX_CONJUNCTIONS = MappingProxyType({
    "furthermore": "also",
    "nevertheless": "but",
    "consequently": "so",
    "moreover": "also",
    "therefore": "so",
    "however": "but",
    "thus": "so",
    "hence": "so",
    "accordingly": "so",
    "nonetheless": "still",
    "notwithstanding": "despite",
    "inasmuch as": "since",
    "whereas": "while",
    "whereby": "where",
})

FORMAL_TRANSITIONS = MappingProxyType({
    "in conclusion": "to sum up",
    "in summary": "to sum up",
    "to summarize": "in short",
    "in addition": "also",
    "additionally": "also",
    "alternatively": "or",
    "conversely": "on the other hand",
    "subsequently": "then",
    "ultimately": "in the end",
    "initially": "first",
    "finally": "last",
})

# ---------------------------------------------------------------------------
# Marketing mode
# ---------------------------------------------------------------------------

# Ordered weakest first; the first category with a hit wins.
WEAK_CTAS = MappingProxyType({
    "very_weak": (
        "click here", "submit", "continue", "proceed", "next", "go", "enter",
        "see more", "find out", "read more", "view more", "more info",
    ),
    "weak": (
        "get started", "sign up", "learn more", "register", "join now",
        "try now", "discover", "explore", "check out", "take a look",
    ),
    "missing_benefit": (
        "download", "subscribe", "follow", "contact us", "get access",
        "join", "start", "begin", "try", "test", "use",
    ),
    "passive": (
        "we'll help", "let us", "allow us", "we can", "we will",
        "it helps", "this enables", "you can", "feel free to",
    ),
})

# Highest strength each weakness category may report.
CTA_CATEGORY_CEILINGS = MappingProxyType({
    "very_weak": 3,
    "weak": 6,
    "passive": 5,
    "missing_benefit": 7,
})

STRONG_CTA_TEMPLATES = MappingProxyType({
    "lead_generation": (
        "Get your free {benefit}", "Download your {benefit}", "Claim your {benefit}",
        "Access your {benefit}", "Start your {benefit}", "Unlock your {benefit}",
    ),
    "trial_signup": (
        "Start your free trial", "Try {product} free", "Get {timeframe} free",
        "Start saving {benefit} today", "Begin your {benefit} journey",
    ),
    "purchase": (
        "Get {product} now", "Buy {product} today", "Order your {product}",
        "Claim your {discount}", "Save {amount} today", "Get {percentage} off",
    ),
    "content": (
        "Download the guide", "Get the checklist", "Access the template",
        "Read the report", "View the case study", "Get the blueprint",
    ),
    "consultation": (
        "Book your free consultation", "Schedule your audit", "Get your assessment",
        "Claim your strategy session", "Reserve your spot",
    ),
})

POWER_WORDS = (
    "guaranteed", "proven", "instant", "exclusive", "limited", "free",
    "boost", "increase", "maximize", "transform", "unlock", "breakthrough",
    "secret", "revealed", "ultimate", "complete", "step-by-step", "easy",
    "fast", "quick", "simple", "effortless", "powerful", "effective",
    "results", "success", "profit", "save", "discover", "amazing",
)

WEAK_HEADLINE_STARTERS = (
    "welcome to", "about us", "our company", "we are", "we provide",
    "our service", "this is", "here is", "check out", "take a look",
    "the best", "great solution", "awesome product", "nice tool",
)

FEATURE_WORDS = (
    "includes", "contains", "has", "features", "built with", "powered by",
    "offers", "provides", "comes with", "equipped with", "supports",
    "enables", "allows", "consists of", "comprises", "incorporates",
)

BENEFIT_WORDS = (
    "helps you", "saves you", "increases your", "reduces your", "gives you",
    "lets you", "allows you to", "enables you to", "makes you", "gets you",
)

VAGUE_CLAIMS = (
    "saves time", "makes money", "improves efficiency", "increases productivity",
    "boosts performance", "enhances results", "optimizes workflow", "streamlines process",
    "reduces costs", "maximizes roi", "drives growth", "scales business",
)

URGENCY_WORDS = (
    "now", "today", "immediately", "instantly", "limited time", "hurry",
    "don't wait", "act fast", "before it's too late", "last chance",
    "deadline", "expires", "while supplies last", "limited spots",
    "few left", "almost gone", "final hours", "ends soon",
)

CTA_ACTION_VERBS = ("get", "start", "download", "claim", "access", "unlock", "boost", "save", "earn", "win")
CTA_BENEFIT_WORDS = ("free", "save", "boost", "increase", "improve", "results", "instant", "immediate")
CTA_URGENCY_WORDS = ("now", "today", "instant", "immediate", "limited", "hurry")
CTA_TENTATIVE_WORDS = ("maybe", "perhaps", "try", "consider", "might")
