# -*- coding: utf-8 -*-

from . import dispatcher, operations
from .core import Core
from .session import Session


class OSDbApi(object):
    """Client for the OpenSubtitles XML-RPC service.

    Holds one Core (settings + logger) and one Session. Every method has a
    blocking form returning a typed result and an `_async` twin returning
    `(result, http_status)` that can be aborted through `cancel_event`
    (an asyncio.Event).
    """

    def __init__(self, settings=None, session=None, core=None):
        self.core = core if core is not None else Core(settings)
        if session is None:
            session = Session(self.core.settings.get('user_agent', ''))
        self.session = session

    def set_user_agent(self, agent):
        self.session.set_user_agent(agent)

    def _execute(self, operation):
        return dispatcher.execute(self.core, self.session, operation)

    async def _execute_async(self, operation, cancel_event):
        return await dispatcher.execute_async(self.core, self.session, operation, cancel_event)

    def _log_in_operation(self, username, password, language):
        settings = self.core.settings
        return operations.log_in(
            settings.get('username', '') if username is None else username,
            settings.get('password', '') if password is None else password,
            settings.get('language', 'en') if language is None else language,
        )

    def _text_encoding(self, encoding):
        return self.core.settings.get('text_encoding', 'utf-8') if encoding is None else encoding

    # session

    def log_in(self, username=None, password=None, language=None):
        return self._execute(self._log_in_operation(username, password, language))

    async def log_in_async(self, username=None, password=None, language=None, cancel_event=None):
        return await self._execute_async(self._log_in_operation(username, password, language), cancel_event)

    def log_out(self):
        return self._execute(operations.log_out())

    async def log_out_async(self, cancel_event=None):
        return await self._execute_async(operations.log_out(), cancel_event)

    def no_operation(self):
        return self._execute(operations.no_operation())

    async def no_operation_async(self, cancel_event=None):
        return await self._execute_async(operations.no_operation(), cancel_event)

    # search and download

    def search_subtitles(self, criteria):
        return self._execute(operations.search_subtitles(criteria))

    async def search_subtitles_async(self, criteria, cancel_event=None):
        return await self._execute_async(operations.search_subtitles(criteria), cancel_event)

    def download_subtitles(self, file_ids):
        return self._execute(operations.download_subtitles(file_ids))

    async def download_subtitles_async(self, file_ids, cancel_event=None):
        return await self._execute_async(operations.download_subtitles(file_ids), cancel_event)

    def get_comments(self, subtitle_ids):
        return self._execute(operations.get_comments(subtitle_ids))

    async def get_comments_async(self, subtitle_ids, cancel_event=None):
        return await self._execute_async(operations.get_comments(subtitle_ids), cancel_event)

    def search_to_mail(self, language_ids, movies):
        return self._execute(operations.search_to_mail(language_ids, movies))

    async def search_to_mail_async(self, language_ids, movies, cancel_event=None):
        return await self._execute_async(operations.search_to_mail(language_ids, movies), cancel_event)

    # movies

    def search_movies_on_imdb(self, query):
        return self._execute(operations.search_movies_on_imdb(query))

    async def search_movies_on_imdb_async(self, query, cancel_event=None):
        return await self._execute_async(operations.search_movies_on_imdb(query), cancel_event)

    def get_imdb_movie_details(self, imdb_id):
        return self._execute(operations.get_imdb_movie_details(imdb_id))

    async def get_imdb_movie_details_async(self, imdb_id, cancel_event=None):
        return await self._execute_async(operations.get_imdb_movie_details(imdb_id), cancel_event)

    def insert_movie(self, movie_name, movie_year):
        return self._execute(operations.insert_movie(movie_name, movie_year))

    async def insert_movie_async(self, movie_name, movie_year, cancel_event=None):
        return await self._execute_async(operations.insert_movie(movie_name, movie_year), cancel_event)

    def insert_movie_hash(self, records):
        return self._execute(operations.insert_movie_hash(records))

    async def insert_movie_hash_async(self, records, cancel_event=None):
        return await self._execute_async(operations.insert_movie_hash(records), cancel_event)

    # reporting and rating

    def server_info(self):
        return self._execute(operations.server_info())

    async def server_info_async(self, cancel_event=None):
        return await self._execute_async(operations.server_info(), cancel_event)

    def report_wrong_movie_hash(self, id_sub_movie_file):
        return self._execute(operations.report_wrong_movie_hash(id_sub_movie_file))

    async def report_wrong_movie_hash_async(self, id_sub_movie_file, cancel_event=None):
        return await self._execute_async(operations.report_wrong_movie_hash(id_sub_movie_file), cancel_event)

    def report_wrong_imdb_movie(self, movie_hash, movie_byte_size, imdb_id):
        return self._execute(operations.report_wrong_imdb_movie(movie_hash, movie_byte_size, imdb_id))

    async def report_wrong_imdb_movie_async(self, movie_hash, movie_byte_size, imdb_id, cancel_event=None):
        operation = operations.report_wrong_imdb_movie(movie_hash, movie_byte_size, imdb_id)
        return await self._execute_async(operation, cancel_event)

    def subtitles_vote(self, subtitle_id, score):
        return self._execute(operations.subtitles_vote(subtitle_id, score))

    async def subtitles_vote_async(self, subtitle_id, score, cancel_event=None):
        return await self._execute_async(operations.subtitles_vote(subtitle_id, score), cancel_event)

    def add_comment(self, subtitle_id, comment, bad_subtitle=False):
        return self._execute(operations.add_comment(subtitle_id, comment, bad_subtitle))

    async def add_comment_async(self, subtitle_id, comment, bad_subtitle=False, cancel_event=None):
        return await self._execute_async(operations.add_comment(subtitle_id, comment, bad_subtitle), cancel_event)

    def add_request(self, sub_language_id, imdb_id, comment=''):
        return self._execute(operations.add_request(sub_language_id, imdb_id, comment))

    async def add_request_async(self, sub_language_id, imdb_id, comment='', cancel_event=None):
        return await self._execute_async(operations.add_request(sub_language_id, imdb_id, comment), cancel_event)

    # user interface

    def get_sub_languages(self, language='en'):
        return self._execute(operations.get_sub_languages(language))

    async def get_sub_languages_async(self, language='en', cancel_event=None):
        return await self._execute_async(operations.get_sub_languages(language), cancel_event)

    def detect_language(self, texts, encoding=None):
        return self._execute(operations.detect_language(texts, self._text_encoding(encoding)))

    async def detect_language_async(self, texts, encoding=None, cancel_event=None):
        operation = operations.detect_language(texts, self._text_encoding(encoding))
        return await self._execute_async(operation, cancel_event)

    def get_available_translations(self, program):
        return self._execute(operations.get_available_translations(program))

    async def get_available_translations_async(self, program, cancel_event=None):
        return await self._execute_async(operations.get_available_translations(program), cancel_event)

    def get_translation(self, iso639, format, program):
        return self._execute(operations.get_translation(iso639, format, program))

    async def get_translation_async(self, iso639, format, program, cancel_event=None):
        return await self._execute_async(operations.get_translation(iso639, format, program), cancel_event)

    def auto_update(self, program):
        return self._execute(operations.auto_update(program))

    async def auto_update_async(self, program, cancel_event=None):
        return await self._execute_async(operations.auto_update(program), cancel_event)

    # checking

    def check_movie_hash(self, hashes):
        return self._execute(operations.check_movie_hash(hashes))

    async def check_movie_hash_async(self, hashes, cancel_event=None):
        return await self._execute_async(operations.check_movie_hash(hashes), cancel_event)

    def check_movie_hash2(self, hashes):
        return self._execute(operations.check_movie_hash2(hashes))

    async def check_movie_hash2_async(self, hashes, cancel_event=None):
        return await self._execute_async(operations.check_movie_hash2(hashes), cancel_event)

    def check_sub_hash(self, hashes):
        return self._execute(operations.check_sub_hash(hashes))

    async def check_sub_hash_async(self, hashes, cancel_event=None):
        return await self._execute_async(operations.check_sub_hash(hashes), cancel_event)

    # upload

    def try_upload_subtitles(self, candidates):
        return self._execute(operations.try_upload_subtitles(candidates))

    async def try_upload_subtitles_async(self, candidates, cancel_event=None):
        return await self._execute_async(operations.try_upload_subtitles(candidates), cancel_event)

    def upload_subtitles(self, info, discs):
        return self._execute(operations.upload_subtitles(info, discs))

    async def upload_subtitles_async(self, info, discs, cancel_event=None):
        return await self._execute_async(operations.upload_subtitles(info, discs), cancel_event)
