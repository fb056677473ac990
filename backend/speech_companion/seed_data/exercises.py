"""Exercise templates for each level.

``content`` layout depends on ``type``:

- WORD_RECOGNITION: targetWord, images[{url, isCorrect, alt}], instruction
- PRONUNCIATION: targetWord, audioUrl, phonetics?, instruction, tips?
- MATCHING: pairs[{word, imageUrl}], instruction
- CATEGORIZATION: categories[{name, icon}], items[{word, imageUrl, correctCategory}], instruction
- FILL_IN_BLANK: sentence (with {blank}), options, correctAnswer, imageUrl?, instruction
- STORY_TELLING: storyPrompt, targetWords, imagePrompts?, instruction
- SOUND_RECOGNITION: targetSound, words[{word, hasTargetSound, audioUrl?}], instruction
"""

EXERCISE_TEMPLATES = [
    # Level 0 (12-18 months)
    {
        "title": "Point to Mama",
        "description": "Help your child identify family members",
        "type": "WORD_RECOGNITION",
        "level": 0,
        "category": "Family",
        "word": "mama",
        "content": {
            "targetWord": "mama",
            "images": [
                {"url": "/images/mama.jpg", "isCorrect": True, "alt": "Mother holding baby"},
                {"url": "/images/dada.jpg", "isCorrect": False, "alt": "Father with child"},
                {"url": "/images/baby.jpg", "isCorrect": False, "alt": "Baby playing"},
            ],
            "instruction": "Point to mama!",
        },
    },
    {
        "title": "Say Bye-Bye",
        "description": "Practice waving and saying goodbye",
        "type": "PRONUNCIATION",
        "level": 0,
        "category": "Social",
        "word": "bye",
        "content": {
            "targetWord": "bye",
            "audioUrl": "/audio/bye.mp3",
            "instruction": "Wave your hand and say 'bye-bye'",
            "tips": ["Make it fun with exaggerated waving", "Repeat several times"],
        },
    },
    {
        "title": "More Milk",
        "description": "Learn to ask for more",
        "type": "WORD_RECOGNITION",
        "level": 0,
        "category": "Food",
        "word": "more",
        "content": {
            "targetWord": "more",
            "images": [
                {"url": "/images/more-milk.jpg", "isCorrect": True, "alt": "Glass of milk"},
                {"url": "/images/empty-cup.jpg", "isCorrect": False, "alt": "Empty cup"},
                {"url": "/images/water.jpg", "isCorrect": False, "alt": "Glass of water"},
            ],
            "instruction": "Which one shows MORE milk?",
        },
    },
    # Level 1 (18-24 months)
    {
        "title": "Animal Sounds",
        "description": "Match animals with their sounds",
        "type": "MATCHING",
        "level": 1,
        "category": "Animals",
        "content": {
            "pairs": [
                {"word": "moo", "imageUrl": "/images/cow.jpg"},
                {"word": "woof", "imageUrl": "/images/dog.jpg"},
                {"word": "meow", "imageUrl": "/images/cat.jpg"},
            ],
            "instruction": "Match each animal with its sound!",
        },
    },
    {
        "title": "Body Parts Song",
        "description": "Point to body parts while singing",
        "type": "WORD_RECOGNITION",
        "level": 1,
        "category": "Body Parts",
        "content": {
            "targetWord": "nose",
            "images": [
                {"url": "/images/nose.jpg", "isCorrect": True, "alt": "Child touching nose"},
                {"url": "/images/eye.jpg", "isCorrect": False, "alt": "Child pointing to eye"},
                {"url": "/images/mouth.jpg", "isCorrect": False, "alt": "Child pointing to mouth"},
            ],
            "instruction": "Touch your nose!",
        },
    },
    {
        "title": "Two-Word Phrases",
        "description": "Practice combining words",
        "type": "FILL_IN_BLANK",
        "level": 1,
        "category": "Food",
        "content": {
            "sentence": "More {blank}",
            "options": ["milk", "water", "juice"],
            "correctAnswer": "milk",
            "imageUrl": "/images/milk-glass.jpg",
            "instruction": "What do you want more of?",
        },
    },
    # Level 2 (2-3 years)
    {
        "title": "Sort the Animals",
        "description": "Put animals in the right groups",
        "type": "CATEGORIZATION",
        "level": 2,
        "category": "Animals",
        "content": {
            "categories": [
                {"name": "Farm Animals", "icon": "🚜"},
                {"name": "Wild Animals", "icon": "🌳"},
                {"name": "Pets", "icon": "🏠"},
            ],
            "items": [
                {"word": "cow", "imageUrl": "/images/cow.jpg", "correctCategory": "Farm Animals"},
                {"word": "lion", "imageUrl": "/images/lion.jpg", "correctCategory": "Wild Animals"},
                {"word": "dog", "imageUrl": "/images/dog.jpg", "correctCategory": "Pets"},
                {"word": "pig", "imageUrl": "/images/pig.jpg", "correctCategory": "Farm Animals"},
                {"word": "cat", "imageUrl": "/images/cat.jpg", "correctCategory": "Pets"},
                {"word": "elephant", "imageUrl": "/images/elephant.jpg", "correctCategory": "Wild Animals"},
            ],
            "instruction": "Put each animal where it belongs!",
        },
    },
    {
        "title": "Color Hunt",
        "description": "Find objects of specific colors",
        "type": "WORD_RECOGNITION",
        "level": 2,
        "category": "Colors",
        "content": {
            "targetWord": "red",
            "images": [
                {"url": "/images/red-apple.jpg", "isCorrect": True, "alt": "Red apple"},
                {"url": "/images/blue-ball.jpg", "isCorrect": False, "alt": "Blue ball"},
                {"url": "/images/yellow-banana.jpg", "isCorrect": False, "alt": "Yellow banana"},
                {"url": "/images/red-car.jpg", "isCorrect": True, "alt": "Red car"},
            ],
            "instruction": "Find all the RED things!",
        },
    },
    {
        "title": "Complete the Sentence",
        "description": "Fill in missing words in sentences",
        "type": "FILL_IN_BLANK",
        "level": 2,
        "content": {
            "sentence": "The cat is {blank} the chair.",
            "options": ["on", "under", "beside"],
            "correctAnswer": "on",
            "imageUrl": "/images/cat-on-chair.jpg",
            "instruction": "Where is the cat?",
        },
    },
    {
        "title": "First Sound Game",
        "description": "Identify words that start with the same sound",
        "type": "SOUND_RECOGNITION",
        "level": 2,
        "content": {
            "targetSound": "b",
            "words": [
                {"word": "ball", "hasTargetSound": True, "audioUrl": "/audio/ball.mp3"},
                {"word": "cat", "hasTargetSound": False, "audioUrl": "/audio/cat.mp3"},
                {"word": "book", "hasTargetSound": True, "audioUrl": "/audio/book.mp3"},
                {"word": "dog", "hasTargetSound": False, "audioUrl": "/audio/dog.mp3"},
            ],
            "instruction": "Which words start with the 'b' sound?",
        },
    },
    # Level 3 (3-4 years)
    {
        "title": "Tell a Story",
        "description": "Create a story using specific words",
        "type": "STORY_TELLING",
        "level": 3,
        "content": {
            "storyPrompt": "Tell me about a day at the park",
            "targetWords": ["playground", "swing", "slide", "friends", "fun"],
            "imagePrompts": ["/images/park.jpg", "/images/playground.jpg"],
            "instruction": "Use these words to tell your story: playground, swing, slide, friends, fun",
        },
    },
    {
        "title": "Emotion Detective",
        "description": "Identify emotions in different situations",
        "type": "WORD_RECOGNITION",
        "level": 3,
        "category": "Emotions",
        "word": "excited",
        "content": {
            "targetWord": "excited",
            "images": [
                {"url": "/images/excited-child.jpg", "isCorrect": True, "alt": "Child jumping with joy"},
                {"url": "/images/sad-child.jpg", "isCorrect": False, "alt": "Child looking sad"},
                {"url": "/images/angry-child.jpg", "isCorrect": False, "alt": "Child looking angry"},
                {"url": "/images/scared-child.jpg", "isCorrect": False, "alt": "Child looking scared"},
            ],
            "instruction": "Which child looks EXCITED?",
        },
    },
    {
        "title": "Rhyme Time",
        "description": "Find words that rhyme",
        "type": "MATCHING",
        "level": 3,
        "content": {
            "pairs": [
                {"word": "cat", "imageUrl": "/images/cat.jpg"},
                {"word": "hat", "imageUrl": "/images/hat.jpg"},
                {"word": "dog", "imageUrl": "/images/dog.jpg"},
                {"word": "frog", "imageUrl": "/images/frog.jpg"},
            ],
            "instruction": "Match the words that rhyme!",
        },
    },
    {
        "title": "Complex Sentences",
        "description": "Build longer, more complex sentences",
        "type": "FILL_IN_BLANK",
        "level": 3,
        "content": {
            "sentence": "Yesterday I {blank} to the store with my mom.",
            "options": ["go", "went", "going"],
            "correctAnswer": "went",
            "imageUrl": "/images/shopping.jpg",
            "instruction": "Choose the correct word for past tense",
        },
    },
    {
        "title": "Sequence Story",
        "description": "Put story events in the right order",
        "type": "CATEGORIZATION",
        "level": 3,
        "content": {
            "categories": [
                {"name": "First", "icon": "1️⃣"},
                {"name": "Second", "icon": "2️⃣"},
                {"name": "Third", "icon": "3️⃣"},
            ],
            "items": [
                {"word": "Wake up", "imageUrl": "/images/wake-up.jpg", "correctCategory": "First"},
                {"word": "Eat breakfast", "imageUrl": "/images/breakfast.jpg", "correctCategory": "Second"},
                {"word": "Go to school", "imageUrl": "/images/school.jpg", "correctCategory": "Third"},
            ],
            "instruction": "Put these morning activities in order!",
        },
    },
]


def exercises_by_level(level):
    return [e for e in EXERCISE_TEMPLATES if e["level"] == level]
