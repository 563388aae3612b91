"""Curated reference tables for industry adjacency and geography.

The bundled defaults cover the industries and geographies most common in
professional networks. A deployment can replace them wholesale by loading a
validated JSON file (see ``application.reference_tables``).

Usage example:
    from bridge_ranker.domain.reference_tables import DEFAULT_REFERENCE_TABLES

    tables = DEFAULT_REFERENCE_TABLES
    assert tables.are_industries_related("SaaS", "cloud computing")
    assert tables.geographic_region("Germany") == "Europe"
    assert tables.state_abbreviation("california") == "CA"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

UNKNOWN = "Unknown"
NORTH_AMERICA = "North America"
SOUTH_AMERICA = "South America"
EUROPE = "Europe"
ASIA = "Asia"
AFRICA = "Africa"
OCEANIA = "Oceania"
MIDDLE_EAST = "Middle East"
UNITED_STATES = "United States"

INDUSTRY_RELATIONSHIPS: dict[str, tuple[str, ...]] = {
    # Technology & software
    "Software Development": (
        "Information Technology",
        "Computer Software",
        "Internet",
        "SaaS",
        "Cloud Computing",
        "IT Services",
        "Telecommunications",
        "Computer Networking",
    ),
    "Information Technology": (
        "Software Development",
        "IT Services",
        "Computer Networking",
        "Cybersecurity",
        "Cloud Computing",
        "Telecommunications",
        "Computer Software",
    ),
    "Computer Software": (
        "Software Development",
        "Information Technology",
        "SaaS",
        "Internet",
        "Cloud Computing",
        "Gaming",
        "Mobile Applications",
    ),
    "SaaS": (
        "Software Development",
        "Computer Software",
        "Cloud Computing",
        "Internet",
        "Information Technology",
        "IT Services",
    ),
    "Cloud Computing": (
        "Software Development",
        "Information Technology",
        "SaaS",
        "Computer Software",
        "IT Services",
        "Data Infrastructure",
    ),
    "Cybersecurity": (
        "Information Technology",
        "IT Services",
        "Computer Networking",
        "Software Development",
        "Risk Management",
        "Consulting",
    ),
    "IT Services": (
        "Information Technology",
        "Software Development",
        "Consulting",
        "Business Consulting",
        "Cloud Computing",
        "Managed Services",
    ),
    # Data & analytics
    "Data Science": (
        "Machine Learning",
        "Artificial Intelligence",
        "Analytics",
        "Big Data",
        "Research",
        "Statistics",
        "Software Development",
    ),
    "Machine Learning": (
        "Data Science",
        "Artificial Intelligence",
        "Research",
        "Software Development",
        "Robotics",
        "Computer Vision",
    ),
    "Artificial Intelligence": (
        "Machine Learning",
        "Data Science",
        "Research",
        "Robotics",
        "Computer Vision",
        "Natural Language Processing",
        "Software Development",
    ),
    "Analytics": (
        "Data Science",
        "Business Intelligence",
        "Consulting",
        "Market Research",
        "Statistics",
        "Big Data",
    ),
    # Finance
    "Investment Banking": (
        "Finance",
        "Private Equity",
        "Venture Capital",
        "Corporate Finance",
        "Consulting",
        "Hedge Funds",
        "Asset Management",
    ),
    "Finance": (
        "Investment Banking",
        "Accounting",
        "Financial Services",
        "Corporate Finance",
        "Private Equity",
        "Asset Management",
    ),
    "Accounting": (
        "Finance",
        "Consulting",
        "Audit",
        "Tax Services",
        "Financial Services",
        "Corporate Finance",
    ),
    "Financial Services": (
        "Finance",
        "Banking",
        "Investment Banking",
        "Insurance",
        "Asset Management",
        "Wealth Management",
    ),
    "Venture Capital": (
        "Private Equity",
        "Investment Banking",
        "Startups",
        "Technology",
        "Finance",
        "Angel Investing",
    ),
    # Consulting & professional services
    "Consulting": (
        "Management Consulting",
        "Business Consulting",
        "Strategy",
        "IT Services",
        "Accounting",
        "Investment Banking",
        "Advisory",
    ),
    "Management Consulting": (
        "Consulting",
        "Strategy",
        "Business Consulting",
        "Investment Banking",
        "Operations",
        "Organizational Development",
    ),
    # Marketing & media
    "Marketing": (
        "Digital Marketing",
        "Advertising",
        "Brand Management",
        "Public Relations",
        "Social Media",
        "Content Marketing",
        "Market Research",
    ),
    "Advertising": (
        "Marketing",
        "Digital Marketing",
        "Brand Management",
        "Public Relations",
        "Media",
        "Creative Services",
    ),
    "Media": (
        "Entertainment",
        "Publishing",
        "Broadcasting",
        "Journalism",
        "Digital Media",
        "Content Production",
    ),
    "Gaming": (
        "Entertainment",
        "Software Development",
        "Computer Software",
        "Digital Media",
        "Esports",
    ),
    # Healthcare & life sciences
    "Healthcare": (
        "Pharmaceuticals",
        "Biotechnology",
        "Medical Devices",
        "Hospital & Health Care",
        "Health & Wellness",
        "Telemedicine",
    ),
    "Pharmaceuticals": (
        "Healthcare",
        "Biotechnology",
        "Life Sciences",
        "Medical Devices",
        "Research",
        "Clinical Research",
    ),
    "Biotechnology": (
        "Pharmaceuticals",
        "Healthcare",
        "Life Sciences",
        "Research",
        "Genomics",
        "Medical Devices",
    ),
    # Education & research
    "Education": (
        "Higher Education",
        "E-Learning",
        "EdTech",
        "Research",
        "Training & Development",
        "Academic",
    ),
    "Research": (
        "Education",
        "Higher Education",
        "Data Science",
        "Biotechnology",
        "Pharmaceuticals",
        "Academic",
    ),
    # Industry, retail & logistics
    "Manufacturing": (
        "Engineering",
        "Industrial Manufacturing",
        "Automotive",
        "Aerospace",
        "Supply Chain",
        "Operations",
    ),
    "Engineering": (
        "Manufacturing",
        "Mechanical Engineering",
        "Electrical Engineering",
        "Civil Engineering",
        "Aerospace",
        "Automotive",
    ),
    "Retail": (
        "E-commerce",
        "Consumer Goods",
        "Fashion",
        "Wholesale",
        "Supply Chain",
        "Merchandising",
    ),
    "E-commerce": (
        "Retail",
        "Internet",
        "Digital Marketing",
        "Supply Chain",
        "Software Development",
        "Logistics",
    ),
    "Logistics": (
        "Transportation",
        "Supply Chain",
        "E-commerce",
        "Retail",
        "Manufacturing",
        "Warehousing",
    ),
    "Real Estate": (
        "Construction",
        "Property Management",
        "Architecture",
        "Urban Planning",
        "Finance",
        "Investment",
    ),
    "Energy": (
        "Oil & Gas",
        "Renewable Energy",
        "Utilities",
        "Sustainability",
        "Engineering",
        "Environmental Services",
    ),
    # Public sector, legal & people
    "Legal": (
        "Law",
        "Corporate Law",
        "Intellectual Property",
        "Compliance",
        "Regulatory Affairs",
        "Government",
    ),
    "Government": (
        "Public Policy",
        "Legal",
        "Non-Profit",
        "Public Administration",
        "Defense",
    ),
    "Human Resources": (
        "Recruiting",
        "Talent Acquisition",
        "Training & Development",
        "Organizational Development",
        "Compensation & Benefits",
        "HR Tech",
    ),
    "Sales": (
        "Business Development",
        "Account Management",
        "SaaS",
        "Marketing",
        "Enterprise Sales",
        "Retail",
    ),
    "Business Development": (
        "Sales",
        "Strategy",
        "Corporate Development",
        "Partnerships",
        "Marketing",
        "Venture Capital",
    ),
}

COUNTRY_REGIONS: dict[str, str] = {
    "United States": NORTH_AMERICA,
    "USA": NORTH_AMERICA,
    "US": NORTH_AMERICA,
    "Canada": NORTH_AMERICA,
    "Mexico": NORTH_AMERICA,
    "Brazil": SOUTH_AMERICA,
    "Argentina": SOUTH_AMERICA,
    "Chile": SOUTH_AMERICA,
    "Colombia": SOUTH_AMERICA,
    "Peru": SOUTH_AMERICA,
    "Uruguay": SOUTH_AMERICA,
    "United Kingdom": EUROPE,
    "UK": EUROPE,
    "England": EUROPE,
    "Scotland": EUROPE,
    "Wales": EUROPE,
    "Ireland": EUROPE,
    "France": EUROPE,
    "Germany": EUROPE,
    "Italy": EUROPE,
    "Spain": EUROPE,
    "Portugal": EUROPE,
    "Netherlands": EUROPE,
    "Belgium": EUROPE,
    "Switzerland": EUROPE,
    "Austria": EUROPE,
    "Sweden": EUROPE,
    "Norway": EUROPE,
    "Denmark": EUROPE,
    "Finland": EUROPE,
    "Poland": EUROPE,
    "Czech Republic": EUROPE,
    "Romania": EUROPE,
    "Greece": EUROPE,
    "China": ASIA,
    "Japan": ASIA,
    "South Korea": ASIA,
    "India": ASIA,
    "Singapore": ASIA,
    "Hong Kong": ASIA,
    "Taiwan": ASIA,
    "Vietnam": ASIA,
    "Indonesia": ASIA,
    "Philippines": ASIA,
    "Israel": MIDDLE_EAST,
    "Saudi Arabia": MIDDLE_EAST,
    "United Arab Emirates": MIDDLE_EAST,
    "UAE": MIDDLE_EAST,
    "Qatar": MIDDLE_EAST,
    "Turkey": MIDDLE_EAST,
    "South Africa": AFRICA,
    "Nigeria": AFRICA,
    "Kenya": AFRICA,
    "Egypt": AFRICA,
    "Morocco": AFRICA,
    "Ghana": AFRICA,
    "Australia": OCEANIA,
    "New Zealand": OCEANIA,
}

US_STATES: dict[str, str] = {
    "AL": "Alabama",
    "AK": "Alaska",
    "AZ": "Arizona",
    "AR": "Arkansas",
    "CA": "California",
    "CO": "Colorado",
    "CT": "Connecticut",
    "DE": "Delaware",
    "FL": "Florida",
    "GA": "Georgia",
    "HI": "Hawaii",
    "ID": "Idaho",
    "IL": "Illinois",
    "IN": "Indiana",
    "IA": "Iowa",
    "KS": "Kansas",
    "KY": "Kentucky",
    "LA": "Louisiana",
    "ME": "Maine",
    "MD": "Maryland",
    "MA": "Massachusetts",
    "MI": "Michigan",
    "MN": "Minnesota",
    "MS": "Mississippi",
    "MO": "Missouri",
    "MT": "Montana",
    "NE": "Nebraska",
    "NV": "Nevada",
    "NH": "New Hampshire",
    "NJ": "New Jersey",
    "NM": "New Mexico",
    "NY": "New York",
    "NC": "North Carolina",
    "ND": "North Dakota",
    "OH": "Ohio",
    "OK": "Oklahoma",
    "OR": "Oregon",
    "PA": "Pennsylvania",
    "RI": "Rhode Island",
    "SC": "South Carolina",
    "SD": "South Dakota",
    "TN": "Tennessee",
    "TX": "Texas",
    "UT": "Utah",
    "VT": "Vermont",
    "VA": "Virginia",
    "WA": "Washington",
    "WV": "West Virginia",
    "WI": "Wisconsin",
    "WY": "Wyoming",
    "DC": "District of Columbia",
}


@dataclass(frozen=True)
class ReferenceTables:
    """Lookup tables shared by the industry and location matchers.

    Keys are stored as supplied; all lookups are case-insensitive.
    """

    industry_relationships: MappingProxyType[str, tuple[str, ...]]
    country_regions: MappingProxyType[str, str]
    us_states: MappingProxyType[str, str]

    @classmethod
    def build(
        cls,
        *,
        industry_relationships: Mapping[str, tuple[str, ...] | list[str]],
        country_regions: Mapping[str, str],
        us_states: Mapping[str, str],
    ) -> ReferenceTables:
        """Build tables with lower-cased keys for case-insensitive lookup."""
        return cls(
            industry_relationships=MappingProxyType(
                {
                    _fold(name): tuple(_fold(related) for related in related_names)
                    for name, related_names in industry_relationships.items()
                }
            ),
            country_regions=MappingProxyType(
                {_fold(country): region for country, region in country_regions.items()}
            ),
            us_states=MappingProxyType(
                {abbrev.strip().upper(): name.strip() for abbrev, name in us_states.items()}
            ),
        )

    def are_industries_related(self, industry_a: str, industry_b: str) -> bool:
        """Return True when either industry lists the other as adjacent."""
        a = _fold(industry_a)
        b = _fold(industry_b)
        if not a or not b:
            return False
        if a == b:
            return True
        return b in self.industry_relationships.get(a, ()) or a in self.industry_relationships.get(
            b, ()
        )

    def geographic_region(self, country: str) -> str:
        """Return the region for a country name, or ``Unknown``."""
        return self.country_regions.get(_fold(country), UNKNOWN)

    def state_abbreviation(self, text: str) -> str | None:
        """Resolve a US state abbreviation or full name to its abbreviation."""
        candidate = text.strip()
        if not candidate:
            return None
        upper = candidate.upper()
        if upper in self.us_states:
            return upper
        folded = candidate.lower()
        for abbrev, name in self.us_states.items():
            if name.lower() == folded:
                return abbrev
        return None


def _fold(value: str) -> str:
    return value.strip().lower()


DEFAULT_REFERENCE_TABLES = ReferenceTables.build(
    industry_relationships=INDUSTRY_RELATIONSHIPS,
    country_regions=COUNTRY_REGIONS,
    us_states=US_STATES,
)
