"""
Catalog data - Destinations for location pickers, destination cards and mock offers.
"""

# (id, name, city, country, continent, code, type, popular)
DESTINATION_ROWS = [
    ("eur-1", "Paris, France", "Paris", "France", "Europe", "PAR", "city", True),
    ("eur-2", "London, United Kingdom", "London", "United Kingdom", "Europe", "LON", "city", True),
    ("eur-3", "Rome, Italy", "Rome", "Italy", "Europe", "ROM", "city", True),
    ("eur-4", "Barcelona, Spain", "Barcelona", "Spain", "Europe", "BCN", "city", True),
    ("eur-5", "Santorini, Greece", "Santorini", "Greece", "Europe", "JTR", "island", True),
    ("eur-6", "Amsterdam, Netherlands", "Amsterdam", "Netherlands", "Europe", "AMS", "city", True),
    ("eur-7", "Swiss Alps, Switzerland", "Zermatt", "Switzerland", "Europe", "ZRH", "mountain", True),
    ("eur-8", "Vienna, Austria", "Vienna", "Austria", "Europe", "VIE", "city", False),
    ("eur-9", "Prague, Czech Republic", "Prague", "Czech Republic", "Europe", "PRG", "city", False),
    ("eur-10", "Amalfi Coast, Italy", "Amalfi", "Italy", "Europe", "NAP", "beach", True),
    ("eur-11", "Dubrovnik, Croatia", "Dubrovnik", "Croatia", "Europe", "DBV", "beach", False),
    ("eur-12", "Reykjavik, Iceland", "Reykjavik", "Iceland", "Europe", "REK", "city", False),
    ("asi-1", "Tokyo, Japan", "Tokyo", "Japan", "Asia", "TYO", "city", True),
    ("asi-2", "Kyoto, Japan", "Kyoto", "Japan", "Asia", "KIX", "city", True),
    ("asi-3", "Bali, Indonesia", "Bali", "Indonesia", "Asia", "DPS", "island", True),
    ("asi-4", "Maldives", "Male", "Maldives", "Asia", "MLE", "island", True),
    ("asi-5", "Singapore", "Singapore", "Singapore", "Asia", "SIN", "city", True),
    ("asi-6", "Bangkok, Thailand", "Bangkok", "Thailand", "Asia", "BKK", "city", True),
    ("asi-7", "Phuket, Thailand", "Phuket", "Thailand", "Asia", "HKT", "beach", True),
    ("asi-8", "Hong Kong", "Hong Kong", "Hong Kong", "Asia", "HKG", "city", True),
    ("asi-9", "Seoul, South Korea", "Seoul", "South Korea", "Asia", "ICN", "city", False),
    ("asi-10", "Kuala Lumpur, Malaysia", "Kuala Lumpur", "Malaysia", "Asia", "KUL", "city", True),
    ("asi-11", "Langkawi, Malaysia", "Langkawi", "Malaysia", "Asia", "LGK", "island", True),
    ("asi-12", "Hanoi, Vietnam", "Hanoi", "Vietnam", "Asia", "HAN", "city", False),
    ("asi-13", "Dubai, UAE", "Dubai", "United Arab Emirates", "Asia", "DXB", "city", True),
    ("nam-1", "New York City, USA", "New York", "United States", "North America", "NYC", "city", True),
    ("nam-2", "Los Angeles, USA", "Los Angeles", "United States", "North America", "LAX", "city", True),
    ("nam-3", "Miami, USA", "Miami", "United States", "North America", "MIA", "beach", True),
    ("nam-4", "Las Vegas, USA", "Las Vegas", "United States", "North America", "LAS", "city", True),
    ("nam-5", "San Francisco, USA", "San Francisco", "United States", "North America", "SFO", "city", False),
    ("nam-6", "Cancun, Mexico", "Cancun", "Mexico", "North America", "CUN", "beach", True),
    ("nam-7", "Toronto, Canada", "Toronto", "Canada", "North America", "YYZ", "city", False),
    ("nam-8", "Vancouver, Canada", "Vancouver", "Canada", "North America", "YVR", "city", False),
    ("nam-9", "Hawaii, USA", "Honolulu", "United States", "North America", "HNL", "island", True),
    ("sam-1", "Rio de Janeiro, Brazil", "Rio de Janeiro", "Brazil", "South America", "GIG", "beach", True),
    ("sam-2", "Buenos Aires, Argentina", "Buenos Aires", "Argentina", "South America", "EZE", "city", False),
    ("sam-3", "Machu Picchu, Peru", "Cusco", "Peru", "South America", "CUZ", "mountain", True),
    ("sam-4", "Cartagena, Colombia", "Cartagena", "Colombia", "South America", "CTG", "beach", False),
    ("afr-1", "Cape Town, South Africa", "Cape Town", "South Africa", "Africa", "CPT", "city", True),
    ("afr-2", "Marrakech, Morocco", "Marrakech", "Morocco", "Africa", "RAK", "city", True),
    ("afr-3", "Zanzibar, Tanzania", "Zanzibar", "Tanzania", "Africa", "ZNZ", "island", False),
    ("afr-4", "Cairo, Egypt", "Cairo", "Egypt", "Africa", "CAI", "city", True),
    ("afr-5", "Seychelles", "Victoria", "Seychelles", "Africa", "SEZ", "island", True),
    ("afr-6", "Mauritius", "Port Louis", "Mauritius", "Africa", "MRU", "island", True),
    ("oce-1", "Sydney, Australia", "Sydney", "Australia", "Oceania", "SYD", "city", True),
    ("oce-2", "Melbourne, Australia", "Melbourne", "Australia", "Oceania", "MEL", "city", False),
    ("oce-3", "Gold Coast, Australia", "Gold Coast", "Australia", "Oceania", "OOL", "beach", False),
    ("oce-4", "Auckland, New Zealand", "Auckland", "New Zealand", "Oceania", "AKL", "city", False),
    ("oce-5", "Queenstown, New Zealand", "Queenstown", "New Zealand", "Oceania", "ZQN", "mountain", True),
    ("oce-6", "Fiji", "Suva", "Fiji", "Oceania", "SUV", "island", True),
    ("oce-7", "Bora Bora, French Polynesia", "Bora Bora", "French Polynesia", "Oceania", "BOB", "island", True),
]

TRAVEL_DESTINATIONS = [
    {
        "id": "1",
        "title": "Santorini, Greece",
        "location": "Greece, Europe",
        "image": "/images/santorini.png",
        "price": 1200,
        "rating": 4.9,
        "reviews": 1240,
        "tags": ["Beach", "Romantic", "Luxury"],
        "description": "Experience the world-famous sunset in Oia, wander through white-washed streets, and enjoy crystal clear waters.",
        "continent": "Europe",
        "activity": "Relaxation",
        "coordinates": {"lat": 36.3932, "lng": 25.4615},
        "details": {
            "about": "Santorini is one of the Cyclades islands in the Aegean Sea. The whitewashed houses of Fira and Oia cling to cliffs above an underwater caldera and overlook beaches of black, red and white lava pebbles.",
            "highlights": ["Oia Sunset", "Red Beach", "Ancient Thera", "Amoudi Bay"],
            "best_time": "April to October",
            "language": "Greek",
            "currency": "Euro (€)",
        },
    },
    {
        "id": "2",
        "title": "Maldives Overwater Villas",
        "location": "Maldives, Asia",
        "image": "/images/maldives.png",
        "price": 3800,
        "rating": 5.0,
        "reviews": 850,
        "tags": ["Beach", "Luxury", "Honeymoon"],
        "description": "Stay in a private overwater bungalow surrounded by turquoise lagoons and coral reefs.",
        "continent": "Asia",
        "activity": "Beaches",
        "coordinates": {"lat": 3.2028, "lng": 73.2207},
        "details": {
            "about": "The Maldives is an archipelagic state in the Indian Ocean, southwest of Sri Lanka and India, about 750 kilometres from the Asian mainland.",
            "highlights": ["Snorkeling", "Male Fish Market", "Island Hopping", "Underwater Dining"],
            "best_time": "November to April",
            "language": "Dhivehi",
            "currency": "Maldivian Rufiyaa (MVR)",
        },
    },
    {
        "id": "3",
        "title": "Swiss Alps Retreat",
        "location": "Switzerland, Europe",
        "image": "/images/swiss-alps.png",
        "price": 1800,
        "rating": 4.8,
        "reviews": 620,
        "tags": ["Nature", "Hiking", "Mountains"],
        "description": "Breathe in the fresh mountain air, hike through green meadows, and stay in a cozy wooden cabin.",
        "continent": "Europe",
        "activity": "Hiking",
        "coordinates": {"lat": 46.8182, "lng": 8.2275},
        "details": {
            "about": "The Swiss Alps are the high-altitude region of the Alps in Switzerland, known for snow-capped peaks, glaciers and alpine lakes.",
            "highlights": ["Matterhorn", "Jungfraujoch", "Lake Geneva", "Lucerne"],
            "best_time": "June to September (Hiking), December to March (Skiing)",
            "language": "German, French, Italian",
            "currency": "Swiss Franc (CHF)",
        },
    },
    {
        "id": "4",
        "title": "Kyoto Cultural Tour",
        "location": "Kyoto, Japan",
        "image": "/images/kyoto.png",
        "price": 850,
        "rating": 4.9,
        "reviews": 2100,
        "tags": ["Culture", "History", "Food"],
        "description": "Immerse yourself in Japanese tradition, visit ancient temples, and walk through cherry blossom-lined streets.",
        "continent": "Asia",
        "activity": "Cultural",
        "coordinates": {"lat": 35.0116, "lng": 135.7681},
        "details": {
            "about": "Kyoto, once the capital of Japan, is famous for its classical Buddhist temples, gardens, imperial palaces, Shinto shrines and traditional wooden houses.",
            "highlights": ["Kinkaku-ji", "Fushimi Inari-taisha", "Arashiyama Bamboo Grove", "Gion District"],
            "best_time": "March to May, October to November",
            "language": "Japanese",
            "currency": "Japanese Yen (¥)",
        },
    },
]

FLIGHTS = [
    {"id": "f1", "airline": "Aegean Airlines", "from": "New York", "to": "Santorini, Greece", "price": 850,
     "duration": "10h 30m", "departure_time": "10:00 AM", "arrival_time": "8:30 PM", "cabin_class": "economy"},
    {"id": "f2", "airline": "Emirates", "from": "London", "to": "Maldives, Asia", "price": 1200,
     "duration": "12h 15m", "departure_time": "2:00 PM", "arrival_time": "2:15 AM (+1)", "cabin_class": "business"},
    {"id": "f3", "airline": "Swiss Air", "from": "Paris", "to": "Switzerland, Europe", "price": 300,
     "duration": "1h 20m", "departure_time": "9:00 AM", "arrival_time": "10:20 AM", "cabin_class": "economy"},
    {"id": "f4", "airline": "JAL", "from": "Los Angeles", "to": "Kyoto, Japan", "price": 1500,
     "duration": "11h 45m", "departure_time": "11:00 PM", "arrival_time": "5:45 AM (+2)", "cabin_class": "economy"},
]

HOTELS = [
    {"id": "h1", "name": "Santorini Palace", "location": "Santorini, Greece", "price_per_night": 250,
     "rating": 4.8, "image": "/images/santorini.png", "amenities": ["Pool", "Wifi", "Breakfast"]},
    {"id": "h2", "name": "Maldives Water Villa", "location": "Maldives, Asia", "price_per_night": 800,
     "rating": 5.0, "image": "/images/maldives.png", "amenities": ["Ocean View", "Spa", "Private Pool"]},
    {"id": "h3", "name": "Alpine Lodge", "location": "Switzerland, Europe", "price_per_night": 400,
     "rating": 4.7, "image": "/images/swiss-alps.png", "amenities": ["Ski-in/Ski-out", "Fireplace", "Sauna"]},
    {"id": "h4", "name": "Kyoto Ryokan", "location": "Kyoto, Japan", "price_per_night": 300,
     "rating": 4.9, "image": "/images/kyoto.png", "amenities": ["Onsen", "Tea Ceremony", "Garden"]},
]

TOURS = [
    {"id": "t1", "title": "Volcano & Hot Springs", "location": "Santorini, Greece", "price": 80,
     "duration": "5 hours", "rating": 4.5, "image": "/images/santorini.png", "type": "adventure"},
    {"id": "t2", "title": "Snorkeling Safari", "location": "Maldives, Asia", "price": 120,
     "duration": "4 hours", "rating": 4.9, "image": "/images/maldives.png", "type": "adventure"},
    {"id": "t3", "title": "Matterhorn Hike", "location": "Switzerland, Europe", "price": 50,
     "duration": "6 hours", "rating": 4.8, "image": "/images/swiss-alps.png", "type": "adventure"},
    {"id": "t4", "title": "Tea Ceremony Experience", "location": "Kyoto, Japan", "price": 60,
     "duration": "2 hours", "rating": 4.7, "image": "/images/kyoto.png", "type": "cultural"},
]
