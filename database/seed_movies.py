SEED_MOVIES = [
    # Action
    {'title': 'Avengers: Endgame', 'genre': 'Action', 'year': 2019},
    {'title': 'Mad Max: Fury Road', 'genre': 'Action', 'year': 2015},
    {'title': 'John Wick', 'genre': 'Action', 'year': 2014},
    {'title': 'The Dark Knight', 'genre': 'Action', 'year': 2008},

    # Comedy
    {'title': 'The Grand Budapest Hotel', 'genre': 'Comedy', 'year': 2014},
    {'title': 'Superbad', 'genre': 'Comedy', 'year': 2007},
    {'title': 'Borat', 'genre': 'Comedy', 'year': 2006},
    {'title': 'Anchorman', 'genre': 'Comedy', 'year': 2004},

    # Drama
    {'title': 'Parasite', 'genre': 'Drama', 'year': 2019},
    {'title': 'The Shawshank Redemption', 'genre': 'Drama', 'year': 1994},
    {'title': 'Forrest Gump', 'genre': 'Drama', 'year': 1994},
    {'title': 'Schindler’s List', 'genre': 'Drama', 'year': 1993},
]


SEED_DIRECTORS = {
    'Avengers: Endgame': {
        'name': 'Anthony and Joe Russo',
        'age': 50,
        'awards': ['MTV Movie Award']
    },
    'Mad Max: Fury Road': {
        'name': 'George Miller',
        'age': 77,
        'awards': ['Academy Award']
    },
    'John Wick': {
        'name': 'Chad Stahelski',
        'age': 53,
        'awards': ['None']
    },
    'The Dark Knight': {
        'name': 'Christopher Nolan',
        'age': 52,
        'awards': ['Saturn Award']
    },
    'The Grand Budapest Hotel': {
        'name': 'Wes Anderson',
        'age': 52,
        'awards': ['Silver Bear Award']
    },
    'Superbad': {
        'name': 'Greg Mottola',
        'age': 57,
        'awards': ['None']
    },
    'Borat': {
        'name': 'Larry Charles',
        'age': 66,
        'awards': ['AFI Movie of the Year Award']
    },
    'Anchorman': {
        'name': 'Adam McKay',
        'age': 54,
        'awards': ['BAFTA Award']
    },
    'Parasite': {
        'name': 'Bong Joon-ho',
        'age': 53,
        'awards': ['Academy Award for Best Picture', 'Academy Award for Best Director']
    },
    'The Shawshank Redemption': {
        'name': 'Frank Darabont',
        'age': 63,
        'awards': ['Nominated for Academy Award for Best Picture']
    },
    'Forrest Gump': {
        'name': 'Robert Zemeckis',
        'age': 71,
        'awards': ['Academy Award for Best Director']
    },
    'Schindler’s List': {
        'name': 'Steven Spielberg',
        'age': 76,
        'awards': ['Academy Award for Best Director', 'Academy Award for Best Picture']
    },
}
