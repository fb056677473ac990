"""Vocabulary catalogue grouped by speech development level.

Level 0: 12-18 months, first words
Level 1: 18-24 months, two-word phrases
Level 2: 2-3 years, short sentences
Level 3: 3-4 years, complex speech
"""

# (name, description, icon)
CATEGORIES = [
    ("Family", "Family members and relationships", "👨‍👩‍👧‍👦"),
    ("Body Parts", "Parts of the body", "👤"),
    ("Food", "Food and drinks", "🍎"),
    ("Animals", "Animals and pets", "🐶"),
    ("Toys", "Toys and playthings", "🧸"),
    ("Actions", "Action words and verbs", "🏃"),
    ("Colors", "Colors and visual descriptions", "🌈"),
    ("Numbers", "Numbers and counting", "🔢"),
    ("Clothing", "Clothes and accessories", "👕"),
    ("Transportation", "Vehicles and transportation", "🚗"),
    ("Home", "House and household items", "🏠"),
    ("Nature", "Nature and weather", "🌳"),
    ("Emotions", "Feelings and emotions", "😊"),
    ("Social", "Social words and greetings", "👋"),
]

# (text, level, category, difficulty 1-5 within the level)
WORDS = [
    ("mama", 0, "Family", 1),
    ("dada", 0, "Family", 1),
    ("baby", 0, "Family", 2),
    ("eye", 0, "Body Parts", 2),
    ("nose", 0, "Body Parts", 2),
    ("mouth", 0, "Body Parts", 3),
    ("milk", 0, "Food", 1),
    ("water", 0, "Food", 2),
    ("more", 0, "Food", 1),
    ("eat", 0, "Food", 2),
    ("dog", 0, "Animals", 1),
    ("cat", 0, "Animals", 1),
    ("moo", 0, "Animals", 1),
    ("go", 0, "Actions", 1),
    ("up", 0, "Actions", 1),
    ("bye", 0, "Social", 1),
    ("hi", 0, "Social", 1),
    ("no", 0, "Social", 1),
    ("yes", 0, "Social", 2),
    ("mine", 0, "Social", 2),
    ("ball", 0, "Toys", 1),
    ("book", 0, "Toys", 2),
    ("car", 0, "Transportation", 1),
    ("mommy", 1, "Family", 1),
    ("daddy", 1, "Family", 1),
    ("grandma", 1, "Family", 3),
    ("grandpa", 1, "Family", 3),
    ("hand", 1, "Body Parts", 1),
    ("foot", 1, "Body Parts", 1),
    ("head", 1, "Body Parts", 1),
    ("hair", 1, "Body Parts", 2),
    ("ear", 1, "Body Parts", 2),
    ("apple", 1, "Food", 2),
    ("banana", 1, "Food", 3),
    ("cookie", 1, "Food", 2),
    ("juice", 1, "Food", 2),
    ("bread", 1, "Food", 2),
    ("bird", 1, "Animals", 2),
    ("fish", 1, "Animals", 2),
    ("horse", 1, "Animals", 2),
    ("pig", 1, "Animals", 2),
    ("walk", 1, "Actions", 2),
    ("run", 1, "Actions", 2),
    ("sit", 1, "Actions", 2),
    ("come", 1, "Actions", 2),
    ("help", 1, "Actions", 2),
    ("red", 1, "Colors", 2),
    ("blue", 1, "Colors", 2),
    ("one", 1, "Numbers", 2),
    ("two", 1, "Numbers", 3),
    ("shoe", 1, "Clothing", 2),
    ("hat", 1, "Clothing", 2),
    ("bed", 1, "Home", 2),
    ("chair", 1, "Home", 2),
    ("door", 1, "Home", 2),
    ("bus", 1, "Transportation", 2),
    ("truck", 1, "Transportation", 2),
    ("please", 1, "Social", 3),
    ("thank you", 1, "Social", 4),
    ("brother", 2, "Family", 3),
    ("sister", 2, "Family", 3),
    ("uncle", 2, "Family", 3),
    ("aunt", 2, "Family", 3),
    ("finger", 2, "Body Parts", 3),
    ("toe", 2, "Body Parts", 3),
    ("knee", 2, "Body Parts", 3),
    ("elbow", 2, "Body Parts", 4),
    ("shoulder", 2, "Body Parts", 4),
    ("cheese", 2, "Food", 3),
    ("chicken", 2, "Food", 3),
    ("soup", 2, "Food", 3),
    ("cereal", 2, "Food", 3),
    ("sandwich", 2, "Food", 4),
    ("elephant", 2, "Animals", 4),
    ("lion", 2, "Animals", 3),
    ("bear", 2, "Animals", 3),
    ("rabbit", 2, "Animals", 3),
    ("monkey", 2, "Animals", 3),
    ("jump", 2, "Actions", 3),
    ("dance", 2, "Actions", 3),
    ("sing", 2, "Actions", 3),
    ("play", 2, "Actions", 3),
    ("sleep", 2, "Actions", 3),
    ("yellow", 2, "Colors", 3),
    ("green", 2, "Colors", 3),
    ("orange", 2, "Colors", 4),
    ("purple", 2, "Colors", 4),
    ("three", 2, "Numbers", 3),
    ("four", 2, "Numbers", 3),
    ("five", 2, "Numbers", 4),
    ("shirt", 2, "Clothing", 3),
    ("pants", 2, "Clothing", 3),
    ("socks", 2, "Clothing", 3),
    ("jacket", 2, "Clothing", 4),
    ("table", 2, "Home", 3),
    ("window", 2, "Home", 3),
    ("kitchen", 2, "Home", 4),
    ("bathroom", 2, "Home", 4),
    ("airplane", 2, "Transportation", 4),
    ("train", 2, "Transportation", 3),
    ("boat", 2, "Transportation", 3),
    ("tree", 2, "Nature", 3),
    ("flower", 2, "Nature", 3),
    ("sun", 2, "Nature", 3),
    ("moon", 2, "Nature", 3),
    ("happy", 2, "Emotions", 3),
    ("sad", 2, "Emotions", 3),
    ("mad", 2, "Emotions", 3),
    ("sorry", 2, "Social", 3),
    ("excuse me", 2, "Social", 4),
    ("friend", 2, "Social", 3),
    ("cousin", 3, "Family", 4),
    ("nephew", 3, "Family", 5),
    ("niece", 3, "Family", 5),
    ("family", 3, "Family", 4),
    ("stomach", 3, "Body Parts", 4),
    ("back", 3, "Body Parts", 4),
    ("chest", 3, "Body Parts", 4),
    ("neck", 3, "Body Parts", 4),
    ("wrist", 3, "Body Parts", 5),
    ("ankle", 3, "Body Parts", 5),
    ("vegetables", 3, "Food", 5),
    ("spaghetti", 3, "Food", 5),
    ("hamburger", 3, "Food", 4),
    ("pizza", 3, "Food", 4),
    ("breakfast", 3, "Food", 4),
    ("lunch", 3, "Food", 4),
    ("dinner", 3, "Food", 4),
    ("giraffe", 3, "Animals", 4),
    ("zebra", 3, "Animals", 4),
    ("tiger", 3, "Animals", 4),
    ("penguin", 3, "Animals", 4),
    ("butterfly", 3, "Animals", 5),
    ("dinosaur", 3, "Animals", 4),
    ("swimming", 3, "Actions", 4),
    ("climbing", 3, "Actions", 4),
    ("drawing", 3, "Actions", 4),
    ("reading", 3, "Actions", 4),
    ("writing", 3, "Actions", 5),
    ("cooking", 3, "Actions", 4),
    ("cleaning", 3, "Actions", 4),
    ("pink", 3, "Colors", 4),
    ("brown", 3, "Colors", 4),
    ("black", 3, "Colors", 4),
    ("white", 3, "Colors", 4),
    ("gray", 3, "Colors", 5),
    ("six", 3, "Numbers", 4),
    ("seven", 3, "Numbers", 4),
    ("eight", 3, "Numbers", 4),
    ("nine", 3, "Numbers", 4),
    ("ten", 3, "Numbers", 4),
    ("dress", 3, "Clothing", 4),
    ("sweater", 3, "Clothing", 4),
    ("pajamas", 3, "Clothing", 5),
    ("underwear", 3, "Clothing", 4),
    ("gloves", 3, "Clothing", 4),
    ("bedroom", 3, "Home", 4),
    ("living room", 3, "Home", 5),
    ("garage", 3, "Home", 4),
    ("basement", 3, "Home", 5),
    ("attic", 3, "Home", 5),
    ("stairs", 3, "Home", 4),
    ("helicopter", 3, "Transportation", 5),
    ("motorcycle", 3, "Transportation", 5),
    ("bicycle", 3, "Transportation", 4),
    ("scooter", 3, "Transportation", 4),
    ("grass", 3, "Nature", 4),
    ("leaves", 3, "Nature", 4),
    ("clouds", 3, "Nature", 4),
    ("rain", 3, "Nature", 4),
    ("snow", 3, "Nature", 4),
    ("wind", 3, "Nature", 4),
    ("ocean", 3, "Nature", 4),
    ("mountain", 3, "Nature", 5),
    ("excited", 3, "Emotions", 4),
    ("scared", 3, "Emotions", 4),
    ("surprised", 3, "Emotions", 5),
    ("angry", 3, "Emotions", 4),
    ("tired", 3, "Emotions", 4),
    ("proud", 3, "Emotions", 4),
    ("sharing", 3, "Social", 4),
    ("helping", 3, "Social", 4),
    ("listening", 3, "Social", 4),
    ("waiting", 3, "Social", 4),
    ("turn", 3, "Social", 4),
    ("polite", 3, "Social", 5),
    ("puzzle", 3, "Toys", 4),
    ("blocks", 3, "Toys", 4),
    ("crayons", 3, "Toys", 4),
    ("bicycle", 3, "Toys", 4),
    ("dollhouse", 3, "Toys", 5),
]


def words_by_level(level):
    return [w for w in WORDS if w[1] == level]


def words_by_category(category):
    return [w for w in WORDS if w[2] == category]
