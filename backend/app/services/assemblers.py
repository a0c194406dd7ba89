from typing import List

from domain.models.gig import Gig
from domain.models.set import Set
from domain.models.song import Song
from infra.repositories.set_repository import SetRepository
from api.schemas.song import SongRead
from api.schemas.set import SetRead, SetSongRead
from api.schemas.gig import GigRead

def to_song_read(song: Song) -> SongRead:
    return SongRead.model_validate(song)

def to_set_reads(set_repository: SetRepository, sets: List[Set]) -> List[SetRead]:
    """エンティティからDTOへ変換する。曲はセットごとに order 昇順で並べる"""
    members = set_repository.get_member_details(s.id for s in sets)
    results = []
    for s in sets:
        songs = [
            SetSongRead(
                song_id=song.id,
                name=song.name,
                artist=song.artist,
                duration_seconds=song.duration_seconds,
                order=set_song.order,
            )
            for set_song, song in members[s.id]
        ]
        results.append(SetRead(
            id=s.id,
            name=s.name,
            gig_id=s.gig_id,
            notes=s.notes,
            songs=songs,
            created_date=s.created_date,
            updated_date=s.updated_date,
        ))
    return results

def to_set_read(set_repository: SetRepository, set_: Set) -> SetRead:
    return to_set_reads(set_repository, [set_])[0]

def to_gig_reads(set_repository: SetRepository, gigs: List[Gig]) -> List[GigRead]:
    sets_by_gig = set_repository.find_by_gigs(g.id for g in gigs)
    all_sets = [s for g in gigs for s in sets_by_gig[g.id]]
    set_reads = {sr.id: sr for sr in to_set_reads(set_repository, all_sets)}

    return [
        GigRead(
            id=g.id,
            name=g.name,
            date=g.date,
            venue=g.venue,
            notes=g.notes,
            sets=[set_reads[s.id] for s in sets_by_gig[g.id]],
            created_date=g.created_date,
            updated_date=g.updated_date,
        )
        for g in gigs
    ]

def to_gig_read(set_repository: SetRepository, gig: Gig) -> GigRead:
    return to_gig_reads(set_repository, [gig])[0]
