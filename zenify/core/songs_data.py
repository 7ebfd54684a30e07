"""
Zenify Built-in Song Data
무드별 기본 곡 목록 (CATALOG_PATH 미지정 시 사용)
"""

MOODS = (
    "happy",
    "sad",
    "energetic",
    "romantic",
    "chill",
    "motivational",
    "healing",
)

SONGS = {
    "happy": [
        {"title": "Happy", "artist": "Pharrell Williams", "year": "2013", "duration": "3:53"},
        {"title": "Walking on Sunshine", "artist": "Katrina and the Waves", "year": "1985", "duration": "3:58"},
        {"title": "Good as Hell", "artist": "Lizzo", "year": "2016", "duration": "2:39"},
        {"title": "Can't Stop the Feeling!", "artist": "Justin Timberlake", "year": "2016", "duration": "3:56"},
        {"title": "Uptown Funk", "artist": "Mark Ronson ft. Bruno Mars", "year": "2014", "duration": "4:30"},
        {"title": "Here Comes the Sun", "artist": "The Beatles", "year": "1969", "duration": "3:05"},
        {"title": "Dancing Queen", "artist": "ABBA", "year": "1976", "duration": "3:51"},
        {"title": "Shake It Off", "artist": "Taylor Swift", "year": "2014", "duration": "3:39"},
    ],
    "sad": [
        {"title": "Someone Like You", "artist": "Adele", "year": "2011", "duration": "4:45"},
        {"title": "Fix You", "artist": "Coldplay", "year": "2005", "duration": "4:55"},
        {"title": "Hurt", "artist": "Johnny Cash", "year": "2002", "duration": "3:38"},
        {"title": "The Night We Met", "artist": "Lord Huron", "year": "2015", "duration": "3:28"},
        {"title": "Skinny Love", "artist": "Bon Iver", "year": "2007", "duration": "3:58"},
        {"title": "Everybody Hurts", "artist": "R.E.M.", "year": "1992", "duration": "5:17"},
        {"title": "Liability", "artist": "Lorde", "year": "2017", "duration": "2:52"},
    ],
    "energetic": [
        {"title": "Blinding Lights", "artist": "The Weeknd", "year": "2019", "duration": "3:20"},
        {"title": "Mr. Brightside", "artist": "The Killers", "year": "2004", "duration": "3:42"},
        {"title": "Levels", "artist": "Avicii", "year": "2011", "duration": "3:19"},
        {"title": "Don't Stop Me Now", "artist": "Queen", "year": "1978", "duration": "3:29"},
        {"title": "Titanium", "artist": "David Guetta ft. Sia", "year": "2011", "duration": "4:05"},
        {"title": "Seven Nation Army", "artist": "The White Stripes", "year": "2003", "duration": "3:51"},
        {"title": "Thunderstruck", "artist": "AC/DC", "year": "1990", "duration": "4:52"},
    ],
    "romantic": [
        {"title": "Perfect", "artist": "Ed Sheeran", "year": "2017", "duration": "4:23"},
        {"title": "At Last", "artist": "Etta James", "year": "1960", "duration": "3:00"},
        {"title": "All of Me", "artist": "John Legend", "year": "2013", "duration": "4:29"},
        {"title": "Can't Help Falling in Love", "artist": "Elvis Presley", "year": "1961", "duration": "3:02"},
        {"title": "Make You Feel My Love", "artist": "Adele", "year": "2008", "duration": "3:32"},
        {"title": "Thinking Out Loud", "artist": "Ed Sheeran", "year": "2014", "duration": "4:41"},
        {"title": "La Vie en rose", "artist": "Edith Piaf", "year": "1947", "duration": "3:07"},
    ],
    "chill": [
        {"title": "Sunset Lover", "artist": "Petit Biscuit", "year": "2015", "duration": "3:58"},
        {"title": "Redbone", "artist": "Childish Gambino", "year": "2016", "duration": "5:27"},
        {"title": "Electric Feel", "artist": "MGMT", "year": "2007", "duration": "3:49"},
        {"title": "Weightless", "artist": "Marconi Union", "year": "2011", "duration": "8:09"},
        {"title": "Banana Pancakes", "artist": "Jack Johnson", "year": "2005", "duration": "3:11"},
        {"title": "Sweater Weather", "artist": "The Neighbourhood", "year": "2012", "duration": "4:00"},
        {"title": "Cherry Wine", "artist": "Hozier", "year": "2016", "duration": "4:00"},
    ],
    "motivational": [
        {"title": "Lose Yourself", "artist": "Eminem", "year": "2002", "duration": "5:26"},
        {"title": "Eye of the Tiger", "artist": "Survivor", "year": "1982", "duration": "4:05"},
        {"title": "Stronger", "artist": "Kanye West", "year": "2007", "duration": "5:11"},
        {"title": "Hall of Fame", "artist": "The Script ft. will.i.am", "year": "2012", "duration": "3:22"},
        {"title": "Remember the Name", "artist": "Fort Minor", "year": "2005", "duration": "3:50"},
        {"title": "Believer", "artist": "Imagine Dragons", "year": "2017", "duration": "3:24"},
        {"title": "Till I Collapse", "artist": "Eminem", "year": "2002", "duration": "4:57"},
    ],
    "healing": [
        {"title": "Weightless Waves", "artist": "Calm Collective", "year": "2021", "duration": "6:12"},
        {"title": "Holocene", "artist": "Bon Iver", "year": "2011", "duration": "5:37"},
        {"title": "River Flows in You", "artist": "Yiruma", "year": "2001", "duration": "3:10"},
        {"title": "Gymnopedie No.1", "artist": "Erik Satie", "year": "1888", "duration": "3:05"},
        {"title": "Let It Be", "artist": "The Beatles", "year": "1970", "duration": "4:03"},
        {"title": "Bloom", "artist": "The Paper Kites", "year": "2010", "duration": "3:29"},
        {"title": "Breathe Me", "artist": "Sia", "year": "2004", "duration": "4:33"},
    ],
}
