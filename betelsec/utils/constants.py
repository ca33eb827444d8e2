"""
Catalog constants for the risk assessment flow.

Industry lists are closed enumerations: a value outside the active list is
never accepted by the form nor applied from a classifier suggestion.
"""

# Full list offered by the company profile form and the industry classifier.
FULL_INDUSTRIES = (
    'Aerospace & Defense',
    'Automotive',
    'Banking & Capital Markets',
    'Chemicals',
    'Consumer Products',
    'Education',
    'Energy, Resources & Industrials',
    'Financial Services',
    'Government & Public Services',
    'Healthcare',
    'Hospitality',
    'Insurance',
    'Life Sciences & Pharmaceuticals',
    'Manufacturing',
    'Media & Entertainment',
    'Mining & Metals',
    'Oil, Gas & Chemicals',
    'Power, Utilities & Renewables',
    'Real Estate',
    'Retail',
    'Technology, Media & Telecommunications',
    'Transportation & Logistics',
    'Other',
)

# Short list used by the quantum threats form.
SHORT_INDUSTRIES = (
    'Government & Defense',
    'Financial Institutions',
    'Critical Infrastructure',
    'Technology & IP',
    'Pharmaceuticals',
    'Healthcare',
    'Other',
)

ENTERPRISE_SIZES = ('small', 'medium', 'large')

# Sizes that receive the full product bundle.
BUNDLE_SIZES = frozenset({'small', 'medium'})

PRODUCT_PRISM = 'PRISM'
PRODUCT_SYNAPSE = 'SYNAPSE'
PRODUCT_DSG = 'DSG'

PRODUCTS = {
    PRODUCT_PRISM: (
        'Foundational layer: comprehensive data protection and AI-driven '
        'threat mitigation.'
    ),
    PRODUCT_SYNAPSE: 'Protects data in transit (network traffic, APIs).',
    PRODUCT_DSG: 'Protects data at rest (databases, stored files).',
}

LARGE_ENTERPRISE_NOTE = (
    'The needs of a large enterprise are complex and require a deeper, '
    'consultative engagement to map out a full solution architecture, so '
    'PRISM is the initial recommendation.'
)

GENERATION_ERROR_MESSAGE = (
    'An error occurred while generating the briefing. Please try again.'
)
