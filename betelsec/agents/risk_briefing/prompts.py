"""
Risk Briefing Prompt Templates

Contains the system prompt and the user prompt builders for the
RiskBriefingAgent.

Prompt Engineering Pattern:
- XML tags for structured content
- System prompt defines role and output rules only
- User prompt carries the prospect's context and the product directive
- The product directive is decided in code (recommendation_engine) and the
  model is told to elaborate it, never to change it
"""

from typing import Optional

from betelsec.schemas.risk_assessment import ProductRecommendationDirective

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

RISK_BRIEFING_SYSTEM_PROMPT = """You are an expert Post-Quantum Cryptography (PQC) and cybersecurity strategist working for BetelSec.

<role>
You write concise, personalized quantum risk briefings for potential clients of BetelSec.
Each briefing helps a prospect understand which of their data is at risk, which quantum and classical threats they face, and which BetelSec products address them.
</role>

<products>
- PRISM: foundational layer providing comprehensive data protection and AI-driven threat mitigation.
- SYNAPSE: protects data in transit (network traffic, APIs).
- DSG: protects data at rest (databases, stored files).
</products>

<rules>
1. Recommend EXACTLY the products listed in the product directive, in the order given. Never add or drop a product.
2. Keep every point directly relevant to the prospect's industry.
3. When you cite a real-world incident, use a well-known one and state its financial impact.
</rules>

<output_format>
Return JSON matching the response schema. Every field is a markdown string.
Use "* " at the start of a line for bullet points and blank lines between groups.
Do not use headings or tables.
</output_format>"""


# =============================================================================
# DIRECTIVE RENDERING
# =============================================================================

def build_directive_instructions(
    directive: ProductRecommendationDirective,
    company_label: str = "the company",
) -> str:
    """
    Render the product directive as the instruction block of the prompt.

    Args:
        directive: Output of build_recommendation_directive
        company_label: How the prompt refers to the prospect

    Returns:
        str: <product_directive> block listing products in order
    """
    lines = []
    for position, item in enumerate(directive.products, start=1):
        lines.append(f"{position}. {item.product}: {item.framing}")

    if directive.conditionally_include:
        extra = " and ".join(directive.conditionally_include)
        size = directive.size_tier
        guidance = (
            f"Always present PRISM first as the foundational layer for {company_label}. "
            f"For a '{size}' company like {company_label}, also recommend {extra}: "
            "SYNAPSE protects their data in transit and DSG protects their data at rest, "
            "which are critical for growing businesses."
        )
    else:
        guidance = (
            f"Recommend ONLY PRISM as the initial talking point for {company_label}. "
            f"{directive.elaboration_note}"
        )

    products_block = "\n".join(lines)
    return f"""<product_directive>
{products_block}
</product_directive>

<recommendation_guidance>
{guidance}
</recommendation_guidance>"""


# =============================================================================
# USER PROMPT BUILDERS
# =============================================================================

def build_company_profile_prompt(
    company_name: str,
    industry: str,
    enterprise_size: Optional[str],
    directive: ProductRecommendationDirective,
) -> str:
    """
    Build the user prompt for the company profile variant.

    Produces the sensitive_data, threats and product_recommendations sections.
    """
    size_display = enterprise_size or "Not specified"
    directive_block = build_directive_instructions(directive, company_label=company_name)

    return f"""Generate a quantum risk briefing for the following prospect.

<context>
Company: {company_name}
Industry: {industry}
Company Size: {size_display}
</context>

{directive_block}

<instructions>
1. sensitive_data: Identify and list the most critical sensitive data types that an organization like {company_name} typically handles within the '{industry}' sector.

2. threats:
   * Describe the most likely quantum and classical cyber threats that a company of '{size_display}' size in this industry faces (e.g., Harvest Now, Decrypt Later, state-sponsored espionage, ransomware).
   * Comment on how frequently companies in this sector are targeted.
   * Describe a well-known recent cyberattack on the '{industry}' sector and state its multi-million dollar financial loss.

3. product_recommendations: Recommend the products from the product directive, in order, following the recommendation guidance. Explain each recommendation for {company_name}.
</instructions>"""


def build_quantum_threats_prompt(
    industry: str,
    data_types: str,
    directive: ProductRecommendationDirective,
) -> str:
    """
    Build the user prompt for the quantum threats variant.

    Produces the top_threats, hndl_scenarios and product_recommendations
    sections.
    """
    directive_block = build_directive_instructions(directive, company_label="the organization")

    return f"""Generate a quantum risk briefing for an organization in the following sector.

<context>
Industry: {industry}
</context>

<sensitive_data_types>
{data_types}
</sensitive_data_types>

{directive_block}

<instructions>
1. top_threats: List the top quantum threats facing '{industry}' organizations that handle the data types above.

2. hndl_scenarios: Describe concrete "Harvest Now, Decrypt Later" scenarios in which an adversary stores this data today and decrypts it once a cryptographically relevant quantum computer exists. State how long the data stays sensitive.

3. product_recommendations: Recommend the products from the product directive, in order, following the recommendation guidance.
</instructions>"""
