# -*- coding: utf-8 -*-
# Typed request parameters and their encoding into wire values.

import attrs

from . import wire
from .errors import ValidationError


@attrs.define
class SubtitleSearchParameters:
    sub_language_id: str = ''
    movie_hash: str = ''
    movie_byte_size: int = 0
    query: str = ''
    season: str = ''
    episode: str = ''
    imdb_id: str = ''


@attrs.define
class SearchToMailMovie:
    movie_hash: str = ''
    movie_size: int = 0


@attrs.define
class InsertMovieHashParameters:
    movie_hash: str = ''
    movie_byte_size: int = 0
    imdb_id: str = ''
    movie_time_ms: str = ''
    movie_fps: str = ''
    movie_filename: str = ''


@attrs.define
class TryUploadSubtitlesParameters:
    sub_hash: str = ''
    sub_filename: str = ''
    movie_hash: str = ''
    movie_byte_size: int = 0
    movie_fps: str = ''
    movie_time_ms: str = ''
    movie_frames: str = ''
    movie_filename: str = ''


@attrs.define
class UploadSubtitleParameters(TryUploadSubtitlesParameters):
    sub_content: str = ''


@attrs.define
class UploadSubtitleInfo:
    idmovieimdb: str = ''
    sublanguageid: str = ''
    moviereleasename: str = ''
    movieaka: str = ''
    subauthorcomment: str = ''


def require_items(items, message):
    if items is None or len(items) == 0:
        raise ValidationError(message)
    return list(items)


def _text(value):
    return '' if value is None else str(value)


def _int(value, what):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{what} must be a whole number, got {value!r}")


def encode_search_criterion(param):
    members = [('sublanguageid', wire.Scalar(wire.STRING, _text(param.sub_language_id)))]
    movie_hash = _text(param.movie_hash)
    movie_byte_size = param.movie_byte_size or 0
    if isinstance(movie_byte_size, bool) or not isinstance(movie_byte_size, int):
        raise ValidationError(f"Movie byte size must be an integer, got {movie_byte_size!r}")
    if movie_hash and movie_byte_size > 0:
        members.append(('moviehash', wire.Scalar(wire.STRING, movie_hash)))
        members.append(('moviebytesize', wire.Scalar(wire.INT, movie_byte_size)))
    if _text(param.query):
        members.append(('query', wire.Scalar(wire.STRING, _text(param.query))))
    if _text(param.season) and _text(param.episode):
        members.append(('season', wire.Scalar(wire.STRING, _text(param.season))))
        members.append(('episode', wire.Scalar(wire.STRING, _text(param.episode))))
    if _text(param.imdb_id):
        members.append(('imdbid', wire.Scalar(wire.STRING, _text(param.imdb_id))))
    return wire.Struct(tuple(members))


def encode_search_criteria(criteria):
    return wire.Array(tuple(encode_search_criterion(param) for param in criteria))


def encode_ids(ids):
    return wire.Array(tuple(wire.Scalar(wire.INT, _int(value, 'Id')) for value in ids))


def encode_strings(values):
    return wire.Array(tuple(wire.Scalar(wire.STRING, _text(value)) for value in values))


def encode_search_to_mail_movies(movies):
    return wire.Array(tuple(
        wire.struct(('moviehash', _text(movie.movie_hash)), ('moviesize', movie.movie_size))
        for movie in movies
    ))


def encode_movie_info(movie_name, movie_year):
    return wire.struct(('moviename', _text(movie_name)), ('movieyear', _text(movie_year)))


def encode_insert_movie_hash(param):
    return wire.struct(
        ('moviehash', _text(param.movie_hash)),
        ('moviebytesize', param.movie_byte_size),
        ('imdbid', _text(param.imdb_id)),
        ('movietimems', param.movie_time_ms),
        ('moviefps', param.movie_fps),
        ('moviefilename', _text(param.movie_filename)),
    )


def encode_insert_movie_hashes(records):
    return wire.Array(tuple(encode_insert_movie_hash(param) for param in records))


def encode_wrong_imdb_movie(movie_hash, movie_byte_size, imdb_id):
    return wire.struct(
        ('moviehash', _text(movie_hash)),
        ('moviebytesize', movie_byte_size),
        ('imdbid', _text(imdb_id)),
    )


def encode_vote(subtitle_id, score):
    return wire.struct(('idsubtitle', _int(subtitle_id, 'Subtitle id')), ('score', _int(score, 'Score')))


def encode_comment(subtitle_id, comment, bad_subtitle):
    return wire.struct(
        ('idsubtitle', _int(subtitle_id, 'Subtitle id')),
        ('comment', _text(comment)),
        ('badsubtitle', 1 if bad_subtitle else 0),
    )


def encode_request(sub_language_id, imdb_id, comment):
    return wire.struct(
        ('sublanguageid', _text(sub_language_id)),
        ('idmovieimdb', _text(imdb_id)),
        ('comment', _text(comment)),
    )


def _disc_members(disc):
    return [
        ('subhash', _text(disc.sub_hash)),
        ('subfilename', _text(disc.sub_filename)),
        ('moviehash', _text(disc.movie_hash)),
        ('moviebytesize', disc.movie_byte_size),
        ('moviefps', disc.movie_fps),
        ('movietimems', disc.movie_time_ms),
        ('movieframes', disc.movie_frames),
        ('moviefilename', _text(disc.movie_filename)),
    ]


def encode_try_upload(candidates):
    return wire.Struct(tuple(
        (f"cd{index}", wire.struct(*_disc_members(disc)))
        for index, disc in enumerate(candidates, start=1)
    ))


def encode_upload(info, discs):
    baseinfo = wire.struct(
        ('idmovieimdb', _text(info.idmovieimdb)),
        ('sublanguageid', _text(info.sublanguageid)),
        ('moviereleasename', _text(info.moviereleasename)),
        ('movieaka', _text(info.movieaka)),
        ('subauthorcomment', _text(info.subauthorcomment)),
    )
    members = [('baseinfo', baseinfo)]
    for index, disc in enumerate(discs, start=1):
        members.append((f"cd{index}", wire.struct(*(_disc_members(disc) + [('subcontent', _text(disc.sub_content))]))))
    return wire.Struct(tuple(members))
