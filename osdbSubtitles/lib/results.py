# -*- coding: utf-8 -*-
# Typed result shapes returned by every operation.

import attrs

from . import textpack


@attrs.define
class Result:
    status: str = ''
    seconds: float = 0.0

    is_error = False

    @property
    def ok(self):
        return not self.is_error


@attrs.define
class ErrorResult:
    kind: str
    message: str = ''
    status: str = 'Fail'
    seconds: float = 0.0

    is_error = True

    @property
    def ok(self):
        return False


# --- session ---------------------------------------------------------------

@attrs.define
class LogInResult(Result):
    token: str = ''


@attrs.define
class LogOutResult(Result):
    pass


@attrs.define
class DownloadLimits:
    global_wrh_download_limit: str = ''
    client_ip: str = ''
    limit_check_by: str = ''
    client_24h_download_count: str = ''
    client_download_quota: str = ''
    client_24h_download_limit: str = ''


@attrs.define
class NoOperationResult(Result):
    download_limits: DownloadLimits = attrs.field(factory=DownloadLimits)


# --- search and download ---------------------------------------------------

@attrs.define
class SubtitleRecord:
    id_movie: str = ''
    id_movie_imdb: str = ''
    id_sub_movie_file: str = ''
    id_subtitle: str = ''
    id_subtitle_file: str = ''
    iso639: str = ''
    language_name: str = ''
    movie_byte_size: str = ''
    movie_hash: str = ''
    movie_imdb_rating: str = ''
    movie_name: str = ''
    movie_name_eng: str = ''
    movie_release_name: str = ''
    movie_time_ms: str = ''
    movie_year: str = ''
    sub_actual_cd: str = ''
    sub_add_date: str = ''
    sub_author_comment: str = ''
    sub_bad: str = ''
    sub_download_link: str = ''
    sub_downloads_cnt: str = ''
    series_episode: str = ''
    series_season: str = ''
    sub_file_name: str = ''
    sub_format: str = ''
    sub_hash: str = ''
    sub_language_id: str = ''
    sub_rating: str = ''
    sub_size: str = ''
    sub_sum_cd: str = ''
    user_id: str = ''
    user_nick_name: str = ''
    zip_download_link: str = ''


@attrs.define
class SubtitleSearchResult(Result):
    results: list = attrs.field(factory=list)


@attrs.define
class DownloadedSubtitle:
    id_subtitle_file: str = ''
    data: str = ''

    def raw_bytes(self):
        return textpack.unpack_bytes(self.data)

    def decode(self, core):
        return textpack.decode_subtitle(core, self.data, where=f"DownloadSubtitles:{self.id_subtitle_file}")


@attrs.define
class SubtitleDownloadResult(Result):
    results: list = attrs.field(factory=list)


@attrs.define
class Comment:
    id_subtitle: str = ''
    user_id: str = ''
    user_nick_name: str = ''
    comment: str = ''
    created: str = ''


@attrs.define
class GetCommentsResult(Result):
    results: list = attrs.field(factory=list)


@attrs.define
class SearchToMailResult(Result):
    pass


# --- movies ----------------------------------------------------------------

@attrs.define
class MovieMatch:
    id: str = ''
    title: str = ''


@attrs.define
class MovieSearchResult(Result):
    results: list = attrs.field(factory=list)


@attrs.define
class MovieDetailsResult(Result):
    id: str = ''
    title: str = ''
    year: str = ''
    cover: str = ''
    duration: str = ''
    tagline: str = ''
    plot: str = ''
    goofs: str = ''
    trivia: str = ''
    cast: list = attrs.field(factory=list)
    directors: list = attrs.field(factory=list)
    writers: list = attrs.field(factory=list)
    awards: list = attrs.field(factory=list)
    genres: list = attrs.field(factory=list)
    country: list = attrs.field(factory=list)
    language: list = attrs.field(factory=list)
    certification: list = attrs.field(factory=list)


@attrs.define
class InsertMovieResult(Result):
    id: str = ''


@attrs.define
class InsertMovieHashResult(Result):
    accepted_moviehashes: list = attrs.field(factory=list)
    new_imdbs: list = attrs.field(factory=list)


# --- reporting and rating --------------------------------------------------

@attrs.define
class ServerInfoResult(Result):
    xmlrpc_version: str = ''
    xmlrpc_url: str = ''
    application: str = ''
    contact: str = ''
    website_url: str = ''
    users_online_total: int = 0
    users_online_program: int = 0
    users_loggedin: int = 0
    users_max_alltime: str = ''
    users_registered: str = ''
    subs_downloads: str = ''
    subs_subtitle_files: str = ''
    movies_total: str = ''
    movies_aka: str = ''
    total_subtitles_languages: str = ''
    last_update_strings: dict = attrs.field(factory=dict)


@attrs.define
class ReportWrongMovieHashResult(Result):
    pass


@attrs.define
class ReportWrongImdbMovieResult(Result):
    pass


@attrs.define
class SubtitlesVoteResult(Result):
    sub_rating: str = ''
    sub_sum_votes: str = ''
    id_subtitle: str = ''


@attrs.define
class AddCommentResult(Result):
    pass


@attrs.define
class AddRequestResult(Result):
    request_url: str = ''


# --- user interface --------------------------------------------------------

@attrs.define
class SubtitleLanguage:
    sub_language_id: str = ''
    language_name: str = ''
    iso639: str = ''


@attrs.define
class GetSubLanguagesResult(Result):
    languages: list = attrs.field(factory=list)


@attrs.define
class DetectedLanguage:
    input_sample: str = ''
    language_id: str = ''


@attrs.define
class DetectLanguageResult(Result):
    results: list = attrs.field(factory=list)


@attrs.define
class TranslationInfo:
    language_id: str = ''
    last_created: str = ''
    strings_no: str = ''


@attrs.define
class GetAvailableTranslationsResult(Result):
    results: list = attrs.field(factory=list)


@attrs.define
class GetTranslationResult(Result):
    content_data: str = ''


@attrs.define
class AutoUpdateResult(Result):
    version: str = ''
    url_windows: str = ''
    url_linux: str = ''
    comments: str = ''


# --- checking --------------------------------------------------------------

@attrs.define
class MovieHashMatch:
    name: str = ''
    movie_hash: str = ''
    movie_imdb_id: str = ''
    movie_name: str = ''
    movie_year: str = ''


@attrs.define
class CheckMovieHashResult(Result):
    results: list = attrs.field(factory=list)


@attrs.define
class MovieHash2Item:
    movie_hash: str = ''
    movie_imdb_id: str = ''
    movie_name: str = ''
    movie_year: str = ''
    movie_kind: str = ''
    series_season: str = ''
    series_episode: str = ''
    seen_count: str = ''


@attrs.define
class MovieHash2Match:
    name: str = ''
    items: list = attrs.field(factory=list)


@attrs.define
class CheckMovieHash2Result(Result):
    results: list = attrs.field(factory=list)

    def for_hash(self, movie_hash):
        for match in self.results:
            if match.name == movie_hash:
                return match.items
        return []


@attrs.define
class SubHashMatch:
    hash: str = ''
    sub_id: str = ''


@attrs.define
class CheckSubHashResult(Result):
    results: list = attrs.field(factory=list)


# --- upload ----------------------------------------------------------------

@attrs.define
class TryUploadSubtitlesResult(Result):
    already_in_db: int = 0
    results: list = attrs.field(factory=list)


@attrs.define
class UploadSubtitlesResult(Result):
    data: str = ''
    subtitles: bool = False
