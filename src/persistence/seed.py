"""Example profiles written into never-initialized collections."""

DEFAULT_BUYERS = [
    {
        "id": "1",
        "name": "Sarah Chen",
        "email": "sarah.chen@email.com",
        "industries": ["Technology", "SaaS"],
        "budget": "$5M - $15M",
        "timeline": "6-12 months",
        "location": "San Francisco, CA",
        "experience": "3-5",
        "acquisitionType": ["Asset Purchase", "Strategic Partnership"],
    },
    {
        "id": "2",
        "name": "Michael Rodriguez",
        "email": "michael.rodriguez@email.com",
        "industries": ["E-commerce", "Retail"],
        "budget": "$1M - $5M",
        "timeline": "3-6 months",
        "location": "Austin, TX",
        "experience": "1-3",
        "acquisitionType": ["Asset Purchase"],
    },
]

DEFAULT_SELLERS = [
    {
        "id": "1",
        "name": "David Thompson",
        "email": "david@techstartup.com",
        "businessName": "TechFlow Analytics",
        "industry": "Technology",
        "revenue": "$2.5M ARR",
        "askingPrice": "$12M",
        "location": "Seattle, WA",
        "founded": "2019",
        "employees": "11-25",
    },
]
