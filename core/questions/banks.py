"""
Purpose: Per-grade question banks for the non-arithmetic subjects.
Dependencies: None.
Ext Hooks: Load banks from JSON for per-class question sets.

Each entry is (prompt, answer). Answers are single words or numbers so they
can be typed and compared case-insensitively.
"""

GRADES = ('K', '1', '2', '3', '4', '5')

READING_BANK = {
    'K': [
        ("The cat sat on the mat. Where did the cat sit?", "mat"),
        ("Sam has a red ball. What color is the ball?", "red"),
        ("The dog ran to the tree. Where did the dog run?", "tree"),
    ],
    '1': [
        ("Mia likes to eat apples. What does Mia like to eat?", "apples"),
        ("The sun is hot. The snow is cold. What is hot?", "sun"),
        ("Ben went to the park with his kite. What did Ben take?", "kite"),
    ],
    '2': [
        ("The frog jumped into the pond to catch a fly. What did the frog want to catch?", "fly"),
        ("Lena planted seeds in the spring. When did Lena plant seeds?", "spring"),
        ("The owl sleeps all day and hunts at night. When does the owl hunt?", "night"),
    ],
    '3': [
        ("Carlos saved his coins for weeks to buy a new bike. What did Carlos want to buy?", "bike"),
        ("The bridge was closed, so the bus took the long road. What was closed?", "bridge"),
        ("Grandma baked bread because the store was out of it. What did Grandma bake?", "bread"),
    ],
    '4': [
        ("The explorers packed extra water because the desert was hot and dry. Where were they going?", "desert"),
        ("Maya practiced the violin every evening before her concert. What instrument did she play?", "violin"),
        ("The lighthouse kept ships safe from the rocks on foggy nights. What kept the ships safe?", "lighthouse"),
    ],
    '5': [
        ("Although the storm knocked out the power, the family read by candlelight. What did they read by?", "candlelight"),
        ("The scientist repeated the experiment three times to be sure. How many times was it done?", "3"),
        ("The river carved the canyon slowly over millions of years. What carved the canyon?", "river"),
    ],
}

SCIENCE_BANK = {
    'K': [
        ("What do we call frozen water?", "ice"),
        ("Which animal says moo?", "cow"),
        ("What shines in the sky during the day?", "sun"),
    ],
    '1': [
        ("What do plants need from the sky to grow?", "sunlight"),
        ("How many legs does a spider have?", "8"),
        ("What baby animal grows into a frog?", "tadpole"),
    ],
    '2': [
        ("What gas do people breathe in to live?", "oxygen"),
        ("What do caterpillars turn into?", "butterfly"),
        ("What force pulls things down to the ground?", "gravity"),
    ],
    '3': [
        ("Which planet is known as the Red Planet?", "mars"),
        ("What part of a plant takes in water from the soil?", "roots"),
        ("What is the center of an atom called?", "nucleus"),
    ],
    '4': [
        ("What organ pumps blood through the body?", "heart"),
        ("What type of rock is formed by cooling lava?", "igneous"),
        ("What is the closest star to Earth?", "sun"),
    ],
    '5': [
        ("What process do plants use to make food from light?", "photosynthesis"),
        ("What is the largest planet in our solar system?", "jupiter"),
        ("At what temperature in Celsius does water boil?", "100"),
    ],
}

VOCABULARY_BANK = {
    'K': [
        ("Opposite of big?", "small"),
        ("Opposite of up?", "down"),
        ("A word for a baby dog?", "puppy"),
    ],
    '1': [
        ("Opposite of happy?", "sad"),
        ("A word that means very fast?", "quick"),
        ("The place where you sleep at night?", "bed"),
    ],
    '2': [
        ("A word that means very large?", "huge"),
        ("A word that means not loud?", "quiet"),
        ("A person who helps sick animals?", "vet"),
    ],
    '3': [
        ("A word that means to look at closely?", "examine"),
        ("A word that means very old?", "ancient"),
        ("A word that means brave?", "courageous"),
    ],
    '4': [
        ("A word that means to make something bigger?", "enlarge"),
        ("A word that means happening every year?", "annual"),
        ("A word that means to guess based on clues?", "infer"),
    ],
    '5': [
        ("A word that means lasting a very short time?", "brief"),
        ("A word that means to stop for a moment?", "pause"),
        ("A word that means very careful about details?", "meticulous"),
    ],
}

MUSIC_BANK = {
    'K': [
        ("How many beats does a quarter note get?", "1"),
        ("Is a drum played by hitting or blowing?", "hitting"),
        ("What do you call a song sung to help a baby sleep?", "lullaby"),
    ],
    '1': [
        ("How many beats does a half note get?", "2"),
        ("What instrument has black and white keys?", "piano"),
        ("Loud or soft: what does forte mean?", "loud"),
    ],
    '2': [
        ("How many beats does a whole note get?", "4"),
        ("Loud or soft: what does piano mean in music?", "soft"),
        ("How many lines are on a music staff?", "5"),
    ],
    '3': [
        ("What letter comes after G in the musical alphabet?", "a"),
        ("What is a group of musicians playing together called?", "band"),
        ("How many letters are in the musical alphabet?", "7"),
    ],
    '4': [
        ("What clef is also called the G clef?", "treble"),
        ("What is the speed of a piece of music called?", "tempo"),
        ("How many sharps are in the key of C major?", "0"),
    ],
    '5': [
        ("What do you call three or more notes played together?", "chord"),
        ("What is the musical term for getting gradually louder?", "crescendo"),
        ("How many half steps are in an octave?", "12"),
    ],
}

BANKS = {
    'reading': READING_BANK,
    'science': SCIENCE_BANK,
    'vocabulary': VOCABULARY_BANK,
    'music': MUSIC_BANK,
}
