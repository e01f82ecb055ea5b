"""
Seed data loaded into the store once at startup.
Stands in for a real data store; ids are stable strings so links survive restarts.
"""

from datetime import datetime, timezone

from wanderlust.db.models import EntityKind

_IMG = "https://images.unsplash.com/photo-{}?w={}"


DESTINATIONS = [
    {"id": "1", "name": "Bali", "country": "Indonesia", "continent": "asia", "description": "Experience the magical island of Bali with its stunning temples, rice terraces, and pristine beaches.", "shortDescription": "Tropical paradise with temples and beaches", "imageUrl": _IMG.format("1537996194471-e657df975ab4", 800), "rating": 4.9, "reviewCount": 2847, "priceFrom": 899, "featured": True, "trending": True, "popular": True, "isNew": False},
    {"id": "2", "name": "Santorini", "country": "Greece", "continent": "europe", "description": "Explore the iconic white-washed buildings and blue domes of Santorini.", "shortDescription": "Iconic Greek island with stunning sunsets", "imageUrl": _IMG.format("1570077188670-e3a8d69ac5ff", 800), "rating": 4.8, "reviewCount": 3156, "priceFrom": 1299, "featured": True, "trending": False, "popular": True, "isNew": False},
    {"id": "3", "name": "Maldives", "country": "Maldives", "continent": "asia", "description": "Indulge in the ultimate luxury escape in the Maldives.", "shortDescription": "Luxury overwater villas in crystal waters", "imageUrl": _IMG.format("1514282401047-d79a71a590e8", 800), "rating": 4.9, "reviewCount": 1923, "priceFrom": 2499, "featured": True, "trending": True, "popular": True, "isNew": False},
    {"id": "4", "name": "Swiss Alps", "country": "Switzerland", "continent": "europe", "description": "Discover the majestic Swiss Alps with breathtaking mountain scenery.", "shortDescription": "Majestic mountains and alpine villages", "imageUrl": _IMG.format("1531366936337-7c912a4589a7", 800), "rating": 4.7, "reviewCount": 2134, "priceFrom": 1799, "featured": False, "trending": False, "popular": True, "isNew": True},
    {"id": "5", "name": "Tokyo", "country": "Japan", "continent": "asia", "description": "Immerse yourself in the fascinating blend of ultra-modern and traditional Japan.", "shortDescription": "Ancient traditions meet futuristic innovation", "imageUrl": _IMG.format("1540959733332-eab4deabeeaf", 800), "rating": 4.8, "reviewCount": 4521, "priceFrom": 1599, "featured": True, "trending": True, "popular": True, "isNew": False},
    {"id": "6", "name": "Machu Picchu", "country": "Peru", "continent": "south-america", "description": "Trek to the ancient Incan citadel of Machu Picchu.", "shortDescription": "Ancient Incan citadel in the clouds", "imageUrl": _IMG.format("1526392060635-9d6019884377", 800), "rating": 4.9, "reviewCount": 2876, "priceFrom": 1899, "featured": True, "trending": False, "popular": True, "isNew": False},
    {"id": "7", "name": "Safari Kenya", "country": "Kenya", "continent": "africa", "description": "Witness the incredible wildlife of Kenya on an unforgettable safari adventure.", "shortDescription": "Wildlife safari and the great migration", "imageUrl": _IMG.format("1516426122078-c23e76319801", 800), "rating": 4.8, "reviewCount": 1654, "priceFrom": 2199, "featured": False, "trending": True, "popular": False, "isNew": True},
    {"id": "8", "name": "Dubai", "country": "UAE", "continent": "asia", "description": "Experience the glamour and innovation of Dubai.", "shortDescription": "Luxury, innovation, and desert adventures", "imageUrl": _IMG.format("1512453979798-5ea266f8880c", 800), "rating": 4.7, "reviewCount": 3892, "priceFrom": 1399, "featured": False, "trending": True, "popular": True, "isNew": False},
    {"id": "9", "name": "New Zealand", "country": "New Zealand", "continent": "oceania", "description": "Explore the stunning landscapes of New Zealand.", "shortDescription": "Epic landscapes and adventure sports", "imageUrl": _IMG.format("1469521669194-babb45599def", 800), "rating": 4.9, "reviewCount": 1876, "priceFrom": 2299, "featured": False, "trending": False, "popular": True, "isNew": True},
]

TOURS = [
    {"id": "1", "title": "Bali Bliss: Temples & Beaches", "destinationId": "1", "description": "Embark on an unforgettable journey through Bali's most iconic destinations.", "shortDescription": "7-day cultural and beach experience in Bali", "duration": "7 Days / 6 Nights", "price": 1299, "originalPrice": 1599, "rating": 4.9, "reviewCount": 847, "maxGroupSize": 12, "spotsLeft": 4, "category": "adventure", "imageUrl": _IMG.format("1537996194471-e657df975ab4", 800), "galleryImages": [_IMG.format("1555400038-63f5ba517a47", 800)], "inclusions": ["Airport transfers", "6 nights accommodation", "Daily breakfast", "Professional guide"], "exclusions": ["International flights", "Travel insurance", "Personal expenses"], "highlights": ["Watch sunrise at Mount Batur", "Explore Ubud's art markets"], "featured": True},
    {"id": "2", "title": "Santorini Romantic Escape", "destinationId": "2", "description": "Experience the romance of Santorini with this carefully curated getaway.", "shortDescription": "5-day romantic getaway in the Greek Islands", "duration": "5 Days / 4 Nights", "price": 1899, "originalPrice": 2299, "rating": 4.8, "reviewCount": 623, "maxGroupSize": 8, "spotsLeft": 2, "category": "honeymoon", "imageUrl": _IMG.format("1570077188670-e3a8d69ac5ff", 800), "galleryImages": [_IMG.format("1613395877344-13d4a8e0d49e", 800)], "inclusions": ["Luxury cave hotel", "Private transfers", "Wine tasting", "Sunset cruise"], "exclusions": ["Flights", "Travel insurance"], "highlights": ["Private sunset dinner in Oia", "Catamaran cruise"], "featured": True},
    {"id": "3", "title": "Maldives Luxury Retreat", "destinationId": "3", "description": "Indulge in the ultimate luxury at an exclusive Maldives resort.", "shortDescription": "6-day all-inclusive luxury beach escape", "duration": "6 Days / 5 Nights", "price": 3999, "originalPrice": 4799, "rating": 4.9, "reviewCount": 412, "maxGroupSize": 6, "spotsLeft": 3, "category": "luxury", "imageUrl": _IMG.format("1514282401047-d79a71a590e8", 800), "galleryImages": [_IMG.format("1573843981267-be1999ff37cd", 800)], "inclusions": ["Overwater villa", "All meals", "Snorkeling equipment", "Sunset cruise"], "exclusions": ["Flights", "Spa treatments"], "highlights": ["Stay in overwater bungalow", "Swim with manta rays"], "featured": True},
    {"id": "4", "title": "Japan Cultural Discovery", "destinationId": "5", "description": "Journey through Japan's rich cultural heritage and modern marvels.", "shortDescription": "10-day journey through ancient and modern Japan", "duration": "10 Days / 9 Nights", "price": 2799, "originalPrice": 3299, "rating": 4.8, "reviewCount": 892, "maxGroupSize": 14, "spotsLeft": 6, "category": "cultural", "imageUrl": _IMG.format("1540959733332-eab4deabeeaf", 800), "galleryImages": [_IMG.format("1493976040374-85c8e12f0c0e", 800)], "inclusions": ["JR Pass", "Traditional ryokan stay", "Tea ceremony"], "exclusions": ["Flights", "Lunch and dinner"], "highlights": ["Visit Fushimi Inari shrine", "Bullet train adventure"], "featured": True},
    {"id": "5", "title": "African Safari Adventure", "destinationId": "7", "description": "Witness the raw beauty of African wildlife on this unforgettable safari.", "shortDescription": "8-day wildlife safari in Kenya", "duration": "8 Days / 7 Nights", "price": 3499, "originalPrice": 3999, "rating": 4.9, "reviewCount": 567, "maxGroupSize": 8, "spotsLeft": 5, "category": "wildlife", "imageUrl": _IMG.format("1516426122078-c23e76319801", 800), "galleryImages": [_IMG.format("1547471080-7cc2caa01a7e", 800)], "inclusions": ["Luxury tented camp", "All game drives", "Park entrance fees"], "exclusions": ["Flights", "Visa fees"], "highlights": ["Big Five game viewing", "Maasai cultural experience"], "featured": True},
    {"id": "6", "title": "Machu Picchu Trek", "destinationId": "6", "description": "Embark on the classic Inca Trail to Machu Picchu.", "shortDescription": "5-day Inca Trail adventure to the lost city", "duration": "5 Days / 4 Nights", "price": 1699, "originalPrice": 1999, "rating": 4.9, "reviewCount": 734, "maxGroupSize": 10, "spotsLeft": 3, "category": "adventure", "imageUrl": _IMG.format("1526392060635-9d6019884377", 800), "galleryImages": [_IMG.format("1587595431973-160d0d94add1", 800)], "inclusions": ["Inca Trail permit", "Professional guide", "Camping equipment"], "exclusions": ["Flights to Cusco", "Sleeping bag"], "highlights": ["Trek the famous Inca Trail", "Sunrise at Sun Gate"], "featured": False},
]

TOUR_ITINERARY = [
    {"id": "1", "tourId": "1", "day": 1, "title": "Arrival in Bali", "description": "Welcome to Bali! Upon arrival, you'll be transferred to your hotel.", "activities": ["Airport pickup", "Hotel check-in", "Welcome dinner"]},
    {"id": "2", "tourId": "1", "day": 2, "title": "Uluwatu Temple & Beaches", "description": "Explore the stunning clifftop Uluwatu Temple.", "activities": ["Visit Uluwatu Temple", "Kecak dance performance", "Beach time"]},
    {"id": "3", "tourId": "1", "day": 3, "title": "Ubud Art & Culture", "description": "Journey to the cultural heart of Bali.", "activities": ["Monkey Forest visit", "Art market exploration", "Rice terrace trek"]},
    {"id": "4", "tourId": "1", "day": 4, "title": "Mount Batur Sunrise", "description": "Wake early for a magical sunrise trek to Mount Batur.", "activities": ["Sunrise trek", "Volcanic breakfast", "Hot springs relaxation"]},
]

GUIDES = [
    {"id": "1", "name": "Made Wijaya", "title": "Senior Cultural Guide", "bio": "With over 15 years of experience guiding visitors through Bali's sacred sites.", "imageUrl": _IMG.format("1507003211169-0a1dd7228f2d", 400), "languages": ["English", "Indonesian", "Japanese"], "experience": 15, "rating": 4.9},
    {"id": "2", "name": "Elena Papadopoulos", "title": "Greece Specialist", "bio": "Born and raised in Santorini, Elena shares her love for Greek history.", "imageUrl": _IMG.format("1494790108377-be9c29b29330", 400), "languages": ["English", "Greek", "Italian"], "experience": 10, "rating": 4.8},
]

TESTIMONIALS = [
    {"id": "1", "name": "Sarah Mitchell", "location": "New York, USA", "imageUrl": _IMG.format("1438761681033-6461ffad8d80", 200), "rating": 5, "review": "Our Bali trip exceeded all expectations! The guides were incredibly knowledgeable.", "tourId": "1", "destinationName": "Bali", "featured": True},
    {"id": "2", "name": "James & Emma Wilson", "location": "London, UK", "imageUrl": _IMG.format("1472099645785-5658abf4ff4e", 200), "rating": 5, "review": "The Santorini honeymoon package was pure romance.", "tourId": "2", "destinationName": "Santorini", "featured": True},
    {"id": "3", "name": "Raj Patel", "location": "Mumbai, India", "imageUrl": _IMG.format("1507003211169-0a1dd7228f2d", 200), "rating": 5, "review": "The African safari was a dream come true.", "tourId": "5", "destinationName": "Kenya", "featured": True},
    {"id": "4", "name": "Yuki Tanaka", "location": "Tokyo, Japan", "imageUrl": _IMG.format("1544005313-94ddf0286df2", 200), "rating": 5, "review": "I traveled solo to Machu Picchu and felt completely safe.", "tourId": "6", "destinationName": "Peru", "featured": True},
    {"id": "5", "name": "Michael & Lisa Brown", "location": "Sydney, Australia", "imageUrl": _IMG.format("1500648767791-00dcc994a43e", 200), "rating": 5, "review": "The Maldives exceeded our wildest dreams.", "tourId": "3", "destinationName": "Maldives", "featured": True},
]

BLOG_POSTS = [
    {"id": "1", "title": "10 Hidden Gems in Bali You Need to Visit", "slug": "hidden-gems-bali", "excerpt": "Discover the secret spots that most tourists miss.", "content": "Full article content here...", "imageUrl": _IMG.format("1555400038-63f5ba517a47", 800), "category": "Destinations", "author": "Emma Thompson", "authorImage": _IMG.format("1494790108377-be9c29b29330", 100), "readTime": 8, "publishedAt": datetime(2024, 1, 15, tzinfo=timezone.utc), "featured": True},
    {"id": "2", "title": "Ultimate Packing Guide for Adventure Travel", "slug": "adventure-packing-guide", "excerpt": "Pack smart, travel light.", "content": "Full article content here...", "imageUrl": _IMG.format("1488646953014-85cb44e25828", 800), "category": "Travel Tips", "author": "David Chen", "authorImage": _IMG.format("1507003211169-0a1dd7228f2d", 100), "readTime": 6, "publishedAt": datetime(2024, 1, 10, tzinfo=timezone.utc), "featured": False},
    {"id": "3", "title": "Best Time to Visit Each Continent", "slug": "best-time-to-visit", "excerpt": "Plan your trips perfectly with our seasonal guide.", "content": "Full article content here...", "imageUrl": _IMG.format("1526778548025-fa2f459cd5c1", 800), "category": "Planning", "author": "Sophie Anderson", "authorImage": _IMG.format("1544005313-94ddf0286df2", 100), "readTime": 10, "publishedAt": datetime(2024, 1, 5, tzinfo=timezone.utc), "featured": False},
]

TEAM_MEMBERS = [
    {"id": "1", "name": "Alexandra Chen", "role": "Founder & CEO", "bio": "With 20+ years in the travel industry, Alex founded Wanderlust Tours.", "imageUrl": _IMG.format("1573496359142-b8d87734a5a2", 400), "linkedIn": "https://linkedin.com", "twitter": "https://twitter.com"},
    {"id": "2", "name": "Marcus Johnson", "role": "Head of Operations", "bio": "Marcus ensures every trip runs smoothly.", "imageUrl": _IMG.format("1472099645785-5658abf4ff4e", 400), "linkedIn": "https://linkedin.com", "twitter": None},
    {"id": "3", "name": "Priya Sharma", "role": "Lead Travel Designer", "bio": "Priya crafts bespoke itineraries.", "imageUrl": _IMG.format("1580489944761-15a19d654956", 400), "linkedIn": "https://linkedin.com", "twitter": "https://twitter.com"},
    {"id": "4", "name": "Tom Williams", "role": "Customer Experience Manager", "bio": "Tom leads our 24/7 support team.", "imageUrl": _IMG.format("1507003211169-0a1dd7228f2d", 400), "linkedIn": "https://linkedin.com", "twitter": None},
]

FAQS = [
    {"id": "1", "question": "How far in advance should I book my tour?", "answer": "We recommend booking at least 3-6 months in advance for popular destinations, especially during peak seasons.", "category": "general", "tourId": None},
    {"id": "2", "question": "What is your cancellation policy?", "answer": "Full refund for cancellations made 60+ days before departure. 50% refund for 30-59 days. No refund for less than 30 days.", "category": "general", "tourId": None},
    {"id": "3", "question": "Do you offer travel insurance?", "answer": "We strongly recommend travel insurance and can help you find the right coverage for your trip.", "category": "general", "tourId": None},
    {"id": "4", "question": "Are your tours suitable for families with children?", "answer": "Many of our tours are family-friendly! We have specific family-oriented packages designed for all ages.", "category": "general", "tourId": None},
    {"id": "5", "question": "What payment methods do you accept?", "answer": "We accept all major credit cards, PayPal, and bank transfers. We also offer flexible payment plans for bookings.", "category": "general", "tourId": None},
]


SEED_DATA = {
    EntityKind.DESTINATIONS: DESTINATIONS,
    EntityKind.TOURS: TOURS,
    EntityKind.TOUR_ITINERARY: TOUR_ITINERARY,
    EntityKind.GUIDES: GUIDES,
    EntityKind.TESTIMONIALS: TESTIMONIALS,
    EntityKind.BLOG: BLOG_POSTS,
    EntityKind.TEAM: TEAM_MEMBERS,
    EntityKind.FAQS: FAQS,
}
