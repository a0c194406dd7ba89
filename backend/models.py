# Import moved models
from domain.models.song import Song
from domain.models.gig import Gig
from domain.models.set import Set, SetSong
