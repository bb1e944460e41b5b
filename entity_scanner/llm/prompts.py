"""Prompt templates for asking the model about a company."""

GENERAL_PROMPT = """You are a helpful assistant answering a user's question about a company. \
Answer naturally as if you're having a conversation with someone who is researching this company.

User question: "Tell me about {company_name}. What do they do, and what are their main \
products or services?"

Please provide a brief, factual response based on what you know. If you're not certain \
about specific details, say so. Keep your response under 100 words."""

PRICING_PROMPT = """User question: "What is the pricing for {company_name}?"

Please provide pricing information if you know it. If you're not certain, say so. \
Keep your response brief and factual."""

PRICING_AVAILABILITY_PROMPT = """User question: "Does {company_name} have public pricing \
information available?"

Answer briefly based on what you know."""


def build_general_prompt(company_name: str) -> str:
    """Prompt asking what the company does and what it sells."""
    return GENERAL_PROMPT.format(company_name=company_name)


def build_pricing_prompt(company_name: str, pricing_hint_present: bool) -> str:
    """
    Prompt asking about pricing.

    When the website showed a price the model is asked for the price itself,
    otherwise only whether public pricing exists.
    """
    template = PRICING_PROMPT if pricing_hint_present else PRICING_AVAILABILITY_PROMPT
    return template.format(company_name=company_name)
