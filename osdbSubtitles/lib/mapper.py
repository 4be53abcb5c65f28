# -*- coding: utf-8 -*-
# Response mapper: turns the first response struct into a typed result.
#
# Each shape is described by an ordered table of (wire name, attribute,
# decode) entries and applied by the single driver map_members(). Unknown
# members are ignored. A member whose wire kind cannot be decoded raises
# TypeCoercionError.

from collections import OrderedDict

from . import results, wire
from .errors import TypeCoercionError


# --- scalar decoders -------------------------------------------------------

def as_str(core, value, where):
    return str(wire.expect_scalar(value, where))


def as_float(core, value, where):
    scalar = wire.expect_scalar(value, where)
    if scalar.kind == wire.BOOLEAN:
        raise TypeCoercionError(where, 'number', wire.kind_of(scalar))
    try:
        return float(scalar.value)
    except (TypeError, ValueError):
        raise TypeCoercionError(where, 'number', f"{wire.kind_of(scalar)} {scalar.value!r}")


def as_int(core, value, where):
    scalar = wire.expect_scalar(value, where)
    try:
        return int(float(scalar.value)) if scalar.kind == wire.DOUBLE else int(scalar.value)
    except (TypeError, ValueError):
        raise TypeCoercionError(where, 'integer', f"{wire.kind_of(scalar)} {scalar.value!r}")


def as_bool(core, value, where):
    scalar = wire.expect_scalar(value, where)
    if scalar.kind == wire.BOOLEAN:
        return bool(scalar.value)
    if str(scalar.value).strip().lower() in ('1', 'true'):
        return True
    if str(scalar.value).strip().lower() in ('0', 'false', ''):
        return False
    raise TypeCoercionError(where, 'boolean', f"{wire.kind_of(scalar)} {scalar.value!r}")


# --- driver ----------------------------------------------------------------

STATUS_FIELDS = (
    ('status', 'status', as_str),
    ('seconds', 'seconds', as_float),
)


def map_members(core, struct, record, fields, where):
    table = {name: (attribute, decode) for name, attribute, decode in fields}
    for name, value in wire.expect_struct(struct, where):
        entry = table.get(name)
        if entry is None:
            continue
        attribute, decode = entry
        setattr(record, attribute, decode(core, value, f"{where}.{name}"))
        if isinstance(value, wire.Scalar):
            core.logger.debug(f"[{where}] {name}= {value}")
    return record


def _record(factory, fields):
    """Decoder building one nested record from a struct value."""
    def decode(core, value, where):
        return map_members(core, value, factory(), fields, where)
    return decode


def _scalar_list(core, value, where):
    return [as_str(core, item, f"{where}[{index}]") for index, item in enumerate(wire.expect_array(value, where))]


def _struct_values(core, value, where):
    return [as_str(core, member, f"{where}.{name}") for name, member in wire.expect_struct(value, where)]


def _tolerant_array_of(factory, fields):
    """Array of structs where the server may send a scalar (false) for 'nothing found'."""
    def decode(core, value, where):
        if not isinstance(value, wire.Array):
            core.logger.debug(f"[{where}] Array expected, got {wire.kind_of(value)}. Treating as no results.")
            return []
        records = []
        for index, item in enumerate(value):
            if not isinstance(item, wire.Struct):
                continue
            records.append(map_members(core, item, factory(), fields, f"{where}[{index}]"))
        return records
    return decode


def _tolerant_struct(fields):
    """Struct merged into the parent record, skipped when the server sends a scalar instead."""
    def decode(core, value, where, record):
        if not isinstance(value, wire.Struct):
            core.logger.debug(f"[{where}] Struct expected, got {wire.kind_of(value)}. Ignored.")
            return record
        return map_members(core, value, record, fields, where)
    return decode


def map_result(core, struct, factory, fields, where, nested=()):
    """Maps the top-level struct.

    `nested` holds (wire name, merge function) pairs for members whose
    content is folded into the result itself rather than stored in one field.
    """
    record = map_members(core, struct, factory(), STATUS_FIELDS + tuple(fields), where)
    for name, merge in nested:
        value = struct.get(name)
        if value is not None:
            merge(core, value, f"{where}.{name}", record)
    return record


# --- record tables ---------------------------------------------------------

SUBTITLE_RECORD_FIELDS = (
    ('IDMovie', 'id_movie', as_str),
    ('IDMovieImdb', 'id_movie_imdb', as_str),
    ('IDSubMovieFile', 'id_sub_movie_file', as_str),
    ('IDSubtitle', 'id_subtitle', as_str),
    ('IDSubtitleFile', 'id_subtitle_file', as_str),
    ('ISO639', 'iso639', as_str),
    ('LanguageName', 'language_name', as_str),
    ('MovieByteSize', 'movie_byte_size', as_str),
    ('MovieHash', 'movie_hash', as_str),
    ('MovieImdbRating', 'movie_imdb_rating', as_str),
    ('MovieName', 'movie_name', as_str),
    ('MovieNameEng', 'movie_name_eng', as_str),
    ('MovieReleaseName', 'movie_release_name', as_str),
    ('MovieTimeMS', 'movie_time_ms', as_str),
    ('MovieYear', 'movie_year', as_str),
    ('SubActualCD', 'sub_actual_cd', as_str),
    ('SubAddDate', 'sub_add_date', as_str),
    ('SubAuthorComment', 'sub_author_comment', as_str),
    ('SubBad', 'sub_bad', as_str),
    ('SubDownloadLink', 'sub_download_link', as_str),
    ('SubDownloadsCnt', 'sub_downloads_cnt', as_str),
    ('SeriesEpisode', 'series_episode', as_str),
    ('SeriesSeason', 'series_season', as_str),
    ('SubFileName', 'sub_file_name', as_str),
    ('SubFormat', 'sub_format', as_str),
    ('SubHash', 'sub_hash', as_str),
    ('SubLanguageID', 'sub_language_id', as_str),
    ('SubRating', 'sub_rating', as_str),
    ('SubSize', 'sub_size', as_str),
    ('SubSumCD', 'sub_sum_cd', as_str),
    ('UserID', 'user_id', as_str),
    ('UserNickName', 'user_nick_name', as_str),
    ('ZipDownloadLink', 'zip_download_link', as_str),
)

DOWNLOAD_LIMITS_FIELDS = (
    ('global_wrh_download_limit', 'global_wrh_download_limit', as_str),
    ('client_ip', 'client_ip', as_str),
    ('limit_check_by', 'limit_check_by', as_str),
    ('client_24h_download_count', 'client_24h_download_count', as_str),
    ('client_download_quota', 'client_download_quota', as_str),
    ('client_downlaod_quota', 'client_download_quota', as_str),
    ('client_24h_download_limit', 'client_24h_download_limit', as_str),
)

DOWNLOADED_SUBTITLE_FIELDS = (
    ('idsubtitlefile', 'id_subtitle_file', as_str),
    ('data', 'data', as_str),
)

COMMENT_FIELDS = (
    ('IDSubtitle', 'id_subtitle', as_str),
    ('UserID', 'user_id', as_str),
    ('UserNickName', 'user_nick_name', as_str),
    ('Comment', 'comment', as_str),
    ('Created', 'created', as_str),
)

MOVIE_MATCH_FIELDS = (
    ('id', 'id', as_str),
    ('title', 'title', as_str),
)

MOVIE_DETAILS_FIELDS = (
    ('id', 'id', as_str),
    ('title', 'title', as_str),
    ('year', 'year', as_str),
    ('cover', 'cover', as_str),
    ('duration', 'duration', as_str),
    ('tagline', 'tagline', as_str),
    ('plot', 'plot', as_str),
    ('goofs', 'goofs', as_str),
    ('trivia', 'trivia', as_str),
    ('cast', 'cast', _struct_values),
    ('directors', 'directors', _struct_values),
    ('writers', 'writers', _struct_values),
    ('awards', 'awards', _scalar_list),
    ('genres', 'genres', _scalar_list),
    ('country', 'country', _scalar_list),
    ('language', 'language', _scalar_list),
    ('certification', 'certification', _scalar_list),
)

INSERT_MOVIE_HASH_DATA_FIELDS = (
    ('accepted_moviehashes', 'accepted_moviehashes', _scalar_list),
    ('new_imdbs', 'new_imdbs', _scalar_list),
)


def _name_value_dict(core, value, where):
    return OrderedDict((name, as_str(core, member, f"{where}.{name}")) for name, member in wire.expect_struct(value, where))


SERVER_INFO_FIELDS = (
    ('xmlrpc_version', 'xmlrpc_version', as_str),
    ('xmlrpc_url', 'xmlrpc_url', as_str),
    ('application', 'application', as_str),
    ('contact', 'contact', as_str),
    ('website_url', 'website_url', as_str),
    ('users_online_total', 'users_online_total', as_int),
    ('users_online_program', 'users_online_program', as_int),
    ('users_loggedin', 'users_loggedin', as_int),
    ('users_max_alltime', 'users_max_alltime', as_str),
    ('users_registered', 'users_registered', as_str),
    ('subs_downloads', 'subs_downloads', as_str),
    ('subs_subtitle_files', 'subs_subtitle_files', as_str),
    ('movies_total', 'movies_total', as_str),
    ('movies_aka', 'movies_aka', as_str),
    ('total_subtitles_languages', 'total_subtitles_languages', as_str),
    ('last_update_strings', 'last_update_strings', _name_value_dict),
)

SUBTITLES_VOTE_DATA_FIELDS = (
    ('SubRating', 'sub_rating', as_str),
    ('SubSumVotes', 'sub_sum_votes', as_str),
    ('IDSubtitle', 'id_subtitle', as_str),
)

ADD_REQUEST_DATA_FIELDS = (
    ('request_url', 'request_url', as_str),
)

SUBTITLE_LANGUAGE_FIELDS = (
    ('SubLanguageID', 'sub_language_id', as_str),
    ('LanguageName', 'language_name', as_str),
    ('ISO639', 'iso639', as_str),
)

TRANSLATION_INFO_FIELDS = (
    ('LastCreated', 'last_created', as_str),
    ('StringsNo', 'strings_no', as_str),
)

AUTO_UPDATE_FIELDS = (
    ('version', 'version', as_str),
    ('url_windows', 'url_windows', as_str),
    ('url_linux', 'url_linux', as_str),
    ('comments', 'comments', as_str),
)

MOVIE_HASH_MATCH_FIELDS = (
    ('MovieHash', 'movie_hash', as_str),
    ('MovieImdbID', 'movie_imdb_id', as_str),
    ('MovieName', 'movie_name', as_str),
    ('MovieYear', 'movie_year', as_str),
)

MOVIE_HASH2_ITEM_FIELDS = (
    ('MovieHash', 'movie_hash', as_str),
    ('MovieImdbID', 'movie_imdb_id', as_str),
    ('MovieName', 'movie_name', as_str),
    ('MovieYear', 'movie_year', as_str),
    ('MovieKind', 'movie_kind', as_str),
    ('SeriesSeason', 'series_season', as_str),
    ('SeriesEpisode', 'series_episode', as_str),
    ('SeenCount', 'seen_count', as_str),
)


# --- keyed collections -----------------------------------------------------

def _languages_by_sample(core, value, where):
    if not isinstance(value, wire.Struct):
        core.logger.debug(f"[{where}] Struct expected, got {wire.kind_of(value)}. Treating as no results.")
        return []
    return [results.DetectedLanguage(input_sample=name, language_id=as_str(core, member, f"{where}.{name}"))
            for name, member in value]


def _translations_by_language(core, value, where):
    found = []
    for name, member in wire.expect_struct(value, where):
        info = results.TranslationInfo(language_id=name)
        found.append(map_members(core, member, info, TRANSLATION_INFO_FIELDS, f"{where}.{name}"))
    return found


def _movie_hash_matches(core, value, where):
    found = []
    for name, member in wire.expect_struct(value, where):
        match = results.MovieHashMatch(name=name)
        found.append(map_members(core, member, match, MOVIE_HASH_MATCH_FIELDS, f"{where}.{name}"))
    return found


def _movie_hash2_matches(core, value, where):
    found = []
    for name, member in wire.expect_struct(value, where):
        match = results.MovieHash2Match(name=name)
        for index, item in enumerate(wire.expect_array(member, f"{where}.{name}")):
            match.items.append(map_members(core, item, results.MovieHash2Item(), MOVIE_HASH2_ITEM_FIELDS,
                                           f"{where}.{name}[{index}]"))
        found.append(match)
    return found


def _sub_hash_matches(core, value, where):
    return [results.SubHashMatch(hash=name, sub_id=as_str(core, member, f"{where}.{name}"))
            for name, member in wire.expect_struct(value, where)]


def _sub_languages(core, value, where):
    languages = []
    for index, item in enumerate(wire.expect_array(value, where)):
        if not isinstance(item, wire.Struct):
            core.logger.debug(f"[{where}[{index}]] Struct expected, got {wire.kind_of(item)}. Skipped.")
            continue
        languages.append(map_members(core, item, results.SubtitleLanguage(), SUBTITLE_LANGUAGE_FIELDS,
                                     f"{where}[{index}]"))
    return languages


def _merge_struct(fields):
    def merge(core, value, where, record):
        return map_members(core, value, record, fields, where)
    return merge


# --- per-method mappers ----------------------------------------------------

def map_log_in(core, struct):
    return map_result(core, struct, results.LogInResult, (('token', 'token', as_str),), 'LogIn')


def map_log_out(core, struct):
    return map_result(core, struct, results.LogOutResult, (), 'LogOut')


def map_no_operation(core, struct):
    fields = (('download_limits', 'download_limits', _record(results.DownloadLimits, DOWNLOAD_LIMITS_FIELDS)),)
    return map_result(core, struct, results.NoOperationResult, fields, 'NoOperation')


def map_subtitle_search(core, struct):
    fields = (('data', 'results', _tolerant_array_of(results.SubtitleRecord, SUBTITLE_RECORD_FIELDS)),)
    return map_result(core, struct, results.SubtitleSearchResult, fields, 'SearchSubtitles')


def map_subtitle_download(core, struct):
    fields = (('data', 'results', _tolerant_array_of(results.DownloadedSubtitle, DOWNLOADED_SUBTITLE_FIELDS)),)
    return map_result(core, struct, results.SubtitleDownloadResult, fields, 'DownloadSubtitles')


def map_get_comments(core, struct):
    fields = (('data', 'results', _tolerant_array_of(results.Comment, COMMENT_FIELDS)),)
    return map_result(core, struct, results.GetCommentsResult, fields, 'GetComments')


def map_search_to_mail(core, struct):
    return map_result(core, struct, results.SearchToMailResult, (), 'SearchToMail')


def map_movie_search(core, struct):
    fields = (('data', 'results', _tolerant_array_of(results.MovieMatch, MOVIE_MATCH_FIELDS)),)
    return map_result(core, struct, results.MovieSearchResult, fields, 'SearchMoviesOnIMDB')


def map_movie_details(core, struct):
    nested = (('data', _tolerant_struct(MOVIE_DETAILS_FIELDS)),)
    return map_result(core, struct, results.MovieDetailsResult, (), 'GetIMDBMovieDetails', nested)


def map_insert_movie(core, struct):
    return map_result(core, struct, results.InsertMovieResult, (('id', 'id', as_str),), 'InsertMovie')


def map_insert_movie_hash(core, struct):
    nested = (('data', _merge_struct(INSERT_MOVIE_HASH_DATA_FIELDS)),)
    return map_result(core, struct, results.InsertMovieHashResult, (), 'InsertMovieHash', nested)


def map_server_info(core, struct):
    return map_result(core, struct, results.ServerInfoResult, SERVER_INFO_FIELDS, 'ServerInfo')


def map_report_wrong_movie_hash(core, struct):
    return map_result(core, struct, results.ReportWrongMovieHashResult, (), 'ReportWrongMovieHash')


def map_report_wrong_imdb_movie(core, struct):
    return map_result(core, struct, results.ReportWrongImdbMovieResult, (), 'ReportWrongImdbMovie')


def map_subtitles_vote(core, struct):
    nested = (('data', _merge_struct(SUBTITLES_VOTE_DATA_FIELDS)),)
    return map_result(core, struct, results.SubtitlesVoteResult, (), 'SubtitlesVote', nested)


def map_add_comment(core, struct):
    return map_result(core, struct, results.AddCommentResult, (), 'AddComment')


def map_add_request(core, struct):
    nested = (('data', _merge_struct(ADD_REQUEST_DATA_FIELDS)),)
    return map_result(core, struct, results.AddRequestResult, (), 'AddRequest', nested)


def map_get_sub_languages(core, struct):
    fields = (('data', 'languages', _sub_languages),)
    return map_result(core, struct, results.GetSubLanguagesResult, fields, 'GetSubLanguages')


def map_detect_language(core, struct):
    fields = (('data', 'results', _languages_by_sample),)
    return map_result(core, struct, results.DetectLanguageResult, fields, 'DetectLanguage')


def map_get_available_translations(core, struct):
    fields = (('data', 'results', _translations_by_language),)
    return map_result(core, struct, results.GetAvailableTranslationsResult, fields, 'GetAvailableTranslations')


def map_get_translation(core, struct):
    fields = (('data', 'content_data', as_str),)
    return map_result(core, struct, results.GetTranslationResult, fields, 'GetTranslation')


def map_auto_update(core, struct):
    return map_result(core, struct, results.AutoUpdateResult, AUTO_UPDATE_FIELDS, 'AutoUpdate')


def map_check_movie_hash(core, struct):
    fields = (('data', 'results', _movie_hash_matches),)
    return map_result(core, struct, results.CheckMovieHashResult, fields, 'CheckMovieHash')


def map_check_movie_hash2(core, struct):
    fields = (('data', 'results', _movie_hash2_matches),)
    return map_result(core, struct, results.CheckMovieHash2Result, fields, 'CheckMovieHash2')


def map_check_sub_hash(core, struct):
    fields = (('data', 'results', _sub_hash_matches),)
    return map_result(core, struct, results.CheckSubHashResult, fields, 'CheckSubHash')


def map_try_upload_subtitles(core, struct):
    fields = (
        ('alreadyindb', 'already_in_db', as_int),
        ('data', 'results', _tolerant_array_of(results.SubtitleRecord, SUBTITLE_RECORD_FIELDS)),
    )
    return map_result(core, struct, results.TryUploadSubtitlesResult, fields, 'TryUploadSubtitles')


def map_upload_subtitles(core, struct):
    fields = (
        ('data', 'data', as_str),
        ('subtitles', 'subtitles', as_bool),
    )
    return map_result(core, struct, results.UploadSubtitlesResult, fields, 'UploadSubtitles')
