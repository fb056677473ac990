"""Sample vocabulary shown per level in the guided assessment.

Parents review each level and pick the one whose words their child can
already say easily.
"""

# level -> [(category, icon, words)]
GUIDE_CATEGORIES = {
    0: [
        ("First Sounds", "🔊", ["mama", "dada", "baba", "hi", "bye"]),
        ("Basic Needs", "🍼", ["milk", "more", "up", "no", "yes"]),
    ],
    1: [
        ("Family", "👨‍👩‍👧‍👦", ["mom", "dad", "baby", "sister", "brother", "grandma", "grandpa"]),
        ("Food", "🍎", ["apple", "banana", "cookie", "water", "juice", "bread", "cheese"]),
        ("Toys", "🧸", ["ball", "car", "doll", "book", "blocks", "puzzle"]),
        ("Actions", "🏃", ["go", "stop", "come", "sit", "eat", "sleep", "play"]),
    ],
    2: [
        ("Animals", "🐶", ["dog", "cat", "bird", "fish", "cow", "horse", "pig", "chicken", "duck", "sheep"]),
        ("Colors", "🌈", ["red", "blue", "green", "yellow", "pink", "purple", "orange", "black", "white"]),
        ("Body Parts", "👤", ["head", "eyes", "nose", "mouth", "ears", "hands", "feet", "arms", "legs"]),
        ("Clothing", "👕", ["shirt", "pants", "shoes", "socks", "hat", "coat", "dress"]),
        ("Phrases", "💬", ["want more", "all done", "go outside", "my turn", "help me", "I see"]),
    ],
    3: [
        ("Emotions", "😊", ["happy", "sad", "angry", "excited", "scared", "surprised", "tired", "hungry"]),
        ("Places", "🏠", ["home", "school", "park", "store", "hospital", "library", "playground"]),
        ("Time", "⏰", ["today", "tomorrow", "yesterday", "morning", "afternoon", "night", "now", "later"]),
        ("Questions", "❓", ["what", "where", "when", "who", "why", "how", "which"]),
        ("Sentences", "📝", ["I want to go", "Can I have", "Where is my", "I don't like", "Let's play together"]),
    ],
}
