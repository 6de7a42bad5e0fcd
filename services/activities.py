# services/activities.py

from typing import Dict, List

ACTIVITIES_BY_INTEREST: Dict[str, List[str]] = {
    "culture": [
        "Visit local museums and art galleries",
        "Explore historical landmarks and monuments",
        "Attend cultural performances or festivals",
        "Take a guided heritage walk",
        "Visit traditional craft centers",
        "Explore local architecture",
        "Visit religious sites and temples",
    ],
    "food": [
        "Take a food tour of local specialties",
        "Visit bustling food markets",
        "Try cooking classes for local cuisine",
        "Explore street food hotspots",
        "Dine at authentic local restaurants",
        "Visit vineyards or breweries",
        "Try traditional desserts and snacks",
    ],
    "adventure": [
        "Go hiking in nearby natural areas",
        "Try water sports or outdoor activities",
        "Explore adventure parks",
        "Take scenic bike tours",
        "Go on wildlife spotting excursions",
        "Try rock climbing or zip-lining",
        "Go camping in nature reserves",
    ],
    "nature": [
        "Visit botanical gardens and parks",
        "Explore nature reserves",
        "Take scenic walks or hikes",
        "Visit waterfalls or natural landmarks",
        "Enjoy bird watching",
        "Go on a safari or wildlife tour",
        "Visit beaches or coastal areas",
    ],
    "relaxation": [
        "Visit spas and wellness centers",
        "Enjoy beach or pool time",
        "Take leisurely scenic drives",
        "Visit peaceful gardens or temples",
        "Enjoy sunset views",
        "Practice yoga or meditation",
        "Read at cozy cafes",
    ],
    "shopping": [
        "Explore local markets and bazaars",
        "Visit shopping malls and boutiques",
        "Look for handicrafts and souvenirs",
        "Visit antique shops",
        "Explore fashion districts",
        "Visit local artisan workshops",
        "Shop for traditional products",
    ],
}

GENERIC_ACTIVITIES: List[str] = [
    "Explore city center and main attractions",
    "Visit local markets and shopping areas",
    "Try local cuisine at recommended restaurants",
    "Take photos at scenic viewpoints",
    "Learn about local history and culture",
    "Relax at parks or public spaces",
    "Experience local nightlife",
]

TRAVEL_TIPS: List[str] = [
    "Check the weather forecast before your trip",
    "Carry local currency for small purchases",
    "Learn a few basic phrases in the local language",
    "Keep emergency contacts and documents handy",
    "Respect local customs and traditions",
    "Stay hydrated and wear comfortable shoes",
    "Download offline maps and translation apps",
    "Inform your bank about your travel plans",
]

PACKING_LIST: List[str] = [
    "Comfortable walking shoes",
    "Weather-appropriate clothing",
    "Travel documents and copies",
    "Charger and power bank",
    "Basic first aid kit",
    "Reusable water bottle",
    "Camera or smartphone for photos",
    "Travel adapter if needed",
    "Sunscreen and hat",
    "Personal toiletries and medications",
]


def candidate_activities(interests: str) -> List[str]:
    """
    Flatten the activity lists of every recognised interest, in the order the
    interests were given. Falls back to GENERIC_ACTIVITIES when none match.
    """
    selected: List[str] = []
    for key in interests.split(","):
        selected.extend(ACTIVITIES_BY_INTEREST.get(key.strip().lower(), []))
    return selected or list(GENERIC_ACTIVITIES)
