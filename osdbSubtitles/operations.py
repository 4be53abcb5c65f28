# -*- coding: utf-8 -*-
# One builder per OSDb XML-RPC method. Each returns an Operation telling the
# dispatcher what to send and how to map the answer; the session token is
# prepended by the dispatcher for every method that needs it.

import attrs

from .lib import mapper, params, textpack, wire
from .lib.errors import ValidationError

NO_SEARCH_PARAMETER = 'No subtitle search parameter passed'
NO_SUBTITLE_ID = 'No subtitle id passed'
NO_HASH = 'No hash passed'


@attrs.define
class Operation:
    method_name: str
    mapper: object
    build_params: object = None
    requires_session: bool = True
    on_success: object = None


def _string(value):
    return wire.Scalar(wire.STRING, '' if value is None else str(value))


def _store_token(session, result):
    if result.token:
        session.authenticate(result.token)


def _drop_token(session, result):
    session.invalidate()


# session

def log_in(username, password, language):
    return Operation(
        'LogIn', mapper.map_log_in,
        build_params=lambda state: [_string(username), _string(password), _string(language), _string(state.user_agent)],
        requires_session=False,
        on_success=_store_token,
    )


def log_out():
    return Operation('LogOut', mapper.map_log_out, on_success=_drop_token)


def no_operation():
    return Operation('NoOperation', mapper.map_no_operation,
                     build_params=lambda state: [_string(state.user_agent)])


# search and download

def search_subtitles(criteria):
    def build(state):
        return [params.encode_search_criteria(params.require_items(criteria, NO_SEARCH_PARAMETER))]
    return Operation('SearchSubtitles', mapper.map_subtitle_search, build_params=build)


def download_subtitles(file_ids):
    def build(state):
        return [params.encode_ids(params.require_items(file_ids, NO_SUBTITLE_ID))]
    return Operation('DownloadSubtitles', mapper.map_subtitle_download, build_params=build)


def get_comments(subtitle_ids):
    def build(state):
        return [params.encode_ids(params.require_items(subtitle_ids, NO_SUBTITLE_ID))]
    return Operation('GetComments', mapper.map_get_comments, build_params=build)


def search_to_mail(language_ids, movies):
    def build(state):
        languages = params.require_items(language_ids, 'No language id passed')
        wanted = params.require_items(movies, 'No movie passed')
        return [params.encode_strings(languages), params.encode_search_to_mail_movies(wanted)]
    return Operation('SearchToMail', mapper.map_search_to_mail, build_params=build)


# movies

def search_movies_on_imdb(query):
    return Operation('SearchMoviesOnIMDB', mapper.map_movie_search,
                     build_params=lambda state: [_string(query)])


def get_imdb_movie_details(imdb_id):
    return Operation('GetIMDBMovieDetails', mapper.map_movie_details,
                     build_params=lambda state: [_string(imdb_id)])


def insert_movie(movie_name, movie_year):
    return Operation('InsertMovie', mapper.map_insert_movie,
                     build_params=lambda state: [params.encode_movie_info(movie_name, movie_year)])


def insert_movie_hash(records):
    def build(state):
        return [params.encode_insert_movie_hashes(params.require_items(records, 'No movie hash record passed'))]
    return Operation('InsertMovieHash', mapper.map_insert_movie_hash, build_params=build)


# reporting and rating

def server_info():
    return Operation('ServerInfo', mapper.map_server_info,
                     build_params=lambda state: [_string(state.user_agent)])


def report_wrong_movie_hash(id_sub_movie_file):
    return Operation('ReportWrongMovieHash', mapper.map_report_wrong_movie_hash,
                     build_params=lambda state: [_string(id_sub_movie_file)])


def report_wrong_imdb_movie(movie_hash, movie_byte_size, imdb_id):
    return Operation('ReportWrongImdbMovie', mapper.map_report_wrong_imdb_movie,
                     build_params=lambda state: [params.encode_wrong_imdb_movie(movie_hash, movie_byte_size, imdb_id)])


def subtitles_vote(subtitle_id, score):
    def build(state):
        try:
            value = int(score)
        except (TypeError, ValueError):
            raise ValidationError(f"Score must be a number between 1 and 10, got {score!r}")
        if not 1 <= value <= 10:
            raise ValidationError(f"Score must be between 1 and 10, got {score}")
        return [params.encode_vote(subtitle_id, value)]
    return Operation('SubtitlesVote', mapper.map_subtitles_vote, build_params=build)


def add_comment(subtitle_id, comment, bad_subtitle=False):
    return Operation('AddComment', mapper.map_add_comment,
                     build_params=lambda state: [params.encode_comment(subtitle_id, comment, bad_subtitle)])


def add_request(sub_language_id, imdb_id, comment=''):
    return Operation('AddRequest', mapper.map_add_request,
                     build_params=lambda state: [params.encode_request(sub_language_id, imdb_id, comment)])


# user interface

def get_sub_languages(language='en'):
    return Operation('GetSubLanguages', mapper.map_get_sub_languages,
                     build_params=lambda state: [_string(language)])


def detect_language(texts, encoding='utf-8'):
    def build(state):
        samples = params.require_items(texts, 'No text passed')
        try:
            packed = textpack.pack_texts(samples, encoding)
        except LookupError:
            raise ValidationError(f"Unknown text encoding '{encoding}'")
        except UnicodeEncodeError as exc:
            raise ValidationError(f"Text cannot be encoded as {encoding}: {exc}")
        return [params.encode_strings(packed)]
    return Operation('DetectLanguage', mapper.map_detect_language, build_params=build)


def get_available_translations(program):
    return Operation('GetAvailableTranslations', mapper.map_get_available_translations,
                     build_params=lambda state: [_string(program)])


def get_translation(iso639, format, program):
    return Operation('GetTranslation', mapper.map_get_translation,
                     build_params=lambda state: [_string(iso639), _string(format), _string(program)])


def auto_update(program):
    return Operation('AutoUpdate', mapper.map_auto_update,
                     build_params=lambda state: [_string(program)],
                     requires_session=False)


# checking

def check_movie_hash(hashes):
    def build(state):
        return [params.encode_strings(params.require_items(hashes, NO_HASH))]
    return Operation('CheckMovieHash', mapper.map_check_movie_hash, build_params=build)


def check_movie_hash2(hashes):
    def build(state):
        return [params.encode_strings(params.require_items(hashes, NO_HASH))]
    return Operation('CheckMovieHash2', mapper.map_check_movie_hash2, build_params=build)


def check_sub_hash(hashes):
    def build(state):
        return [params.encode_strings(params.require_items(hashes, NO_HASH))]
    return Operation('CheckSubHash', mapper.map_check_sub_hash, build_params=build)


# upload

def try_upload_subtitles(candidates):
    def build(state):
        return [params.encode_try_upload(params.require_items(candidates, 'No subtitle file passed'))]
    return Operation('TryUploadSubtitles', mapper.map_try_upload_subtitles, build_params=build)


def upload_subtitles(info, discs):
    def build(state):
        if info is None:
            raise ValidationError('No upload base info passed')
        return [params.encode_upload(info, params.require_items(discs, 'No subtitle file passed'))]
    return Operation('UploadSubtitles', mapper.map_upload_subtitles, build_params=build)
