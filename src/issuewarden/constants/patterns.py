"""Default text heuristics used by the triage rules."""

from __future__ import annotations

# Low-information tokens stripped before measuring how much of a comment remains.
NOISE_TOKEN_PATTERN: str = (
    r"\+1|-1|👍|👎|❤️?|🙏|🎉|🚀|👀|😢|😭|🥲|🤞|"
    r"\b(?:same(?:\s+here)?|me\s+too|any\s+(?:updates?|news|progress|eta)|updates?|bump(?:ing)?|"
    r"please|pls|plz|thank\s+you|thanks?|thx|ty|also|still|too|here|facing|having|getting|"
    r"happening|issue|problem|error|bug|fix(?:ed)?|news|eta|when|will|be|"
    r"i'm|im|i|am|is|are|was|have|has|the|this|that|it|a|an|for|with|on|in|to|of|any|what|yet)\b|"
    r"[?!.,:;…]"
)

# "Still happening" / "same issue" bumps.
STILL_HAPPENING_PATTERN: str = (
    r"\b(?:still\s+(?:happening|an?\s+(?:issue|problem)|occurring|present|broken|exists|"
    r"seeing\s+this|getting\s+this|facing\s+this|an?\s+bug)|"
    r"same\s+(?:issue|problem|error|bug|here|thing)|"
    r"(?:also|still)\s+(?:having|facing|experiencing|seeing)\s+(?:this|the\s+same|it))\b"
)

LINK_PATTERN: str = r"https?://[^\s<>()\[\]]+"

DISCLOSURE_PATTERN: str = (
    r"\b(?:vulnerabilit(?:y|ies)|exploit(?:s|able|ed|ing)?|CVE-\d{4}-\d{4,}|(?:security\s+)?advisory|"
    r"denial[\s-]of[\s-]service|remote\s+code\s+execution|cross[\s-]site\s+scripting|"
    r"sql\s+injection|privilege\s+escalation|auth(?:entication)?\s+bypass|bypass\s+auth(?:entication)?)\b"
)

EXPLAINER_TEXT: str = (
    "> [!NOTE]\n"
    "> This comment was automatically hidden as off-topic because it does not add new information. "
    "Please upvote the issue instead, or share a reproduction if you have new details."
)
