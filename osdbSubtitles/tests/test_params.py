import unittest

from osdbSubtitles.lib import params, wire
from osdbSubtitles.lib.errors import ValidationError


class TestSearchCriterionEncoding(unittest.TestCase):
    def test_empty_hash_and_zero_size_are_omitted(self):
        criterion = params.SubtitleSearchParameters(sub_language_id='eng', movie_hash='', movie_byte_size=0,
                                                    query='matrix')

        encoded = params.encode_search_criterion(criterion)

        self.assertEqual(encoded.names(), ['sublanguageid', 'query'])

    def test_hash_and_size_are_sent_as_a_pair(self):
        criterion = params.SubtitleSearchParameters(sub_language_id='eng', movie_hash='abc', movie_byte_size=123)

        encoded = params.encode_search_criterion(criterion)

        self.assertEqual(encoded.names(), ['sublanguageid', 'moviehash', 'moviebytesize'])
        self.assertEqual(encoded.get('moviehash'), wire.Scalar(wire.STRING, 'abc'))
        self.assertEqual(encoded.get('moviebytesize'), wire.Scalar(wire.INT, 123))

    def test_hash_without_size_is_dropped(self):
        criterion = params.SubtitleSearchParameters(sub_language_id='eng', movie_hash='abc', movie_byte_size=0)

        self.assertEqual(params.encode_search_criterion(criterion).names(), ['sublanguageid'])

    def test_season_and_episode_need_each_other(self):
        only_season = params.SubtitleSearchParameters(sub_language_id='eng', season='1')
        both = params.SubtitleSearchParameters(sub_language_id='eng', season='1', episode='2', imdb_id='0133093')

        self.assertEqual(params.encode_search_criterion(only_season).names(), ['sublanguageid'])
        self.assertEqual(params.encode_search_criterion(both).names(),
                         ['sublanguageid', 'season', 'episode', 'imdbid'])

    def test_byte_size_must_be_an_integer(self):
        for size in ('123', 12.5):
            criterion = params.SubtitleSearchParameters(movie_hash='abc', movie_byte_size=size)
            with self.assertRaises(ValidationError):
                params.encode_search_criterion(criterion)

    def test_language_is_always_present(self):
        encoded = params.encode_search_criterion(params.SubtitleSearchParameters())

        self.assertEqual(encoded.get('sublanguageid'), wire.Scalar(wire.STRING, ''))


class TestCollectionEncoding(unittest.TestCase):
    def test_require_items_rejects_none_and_empty(self):
        for value in (None, [], ()):
            with self.assertRaises(ValidationError):
                params.require_items(value, 'No subtitle id passed')
        self.assertEqual(params.require_items((1, 2), 'x'), [1, 2])

    def test_ids_are_plain_int_array(self):
        encoded = params.encode_ids(['1951976', 42])

        self.assertEqual(encoded, wire.Array((wire.Scalar(wire.INT, 1951976), wire.Scalar(wire.INT, 42))))

    def test_insert_movie_hash_sends_one_struct_per_record(self):
        records = [
            params.InsertMovieHashParameters(movie_hash='a1', movie_byte_size=10, imdb_id='1'),
            params.InsertMovieHashParameters(movie_hash='b2', movie_byte_size=20, imdb_id='2'),
        ]

        encoded = params.encode_insert_movie_hashes(records)

        self.assertEqual(len(encoded), 2)
        self.assertEqual(encoded.values[1].names(),
                         ['moviehash', 'moviebytesize', 'imdbid', 'movietimems', 'moviefps', 'moviefilename'])
        self.assertEqual(encoded.values[1].get('moviehash'), wire.Scalar(wire.STRING, 'b2'))

    def test_try_upload_names_discs_from_one(self):
        discs = [params.TryUploadSubtitlesParameters(sub_hash='h1'), params.TryUploadSubtitlesParameters(sub_hash='h2')]

        encoded = params.encode_try_upload(discs)

        self.assertEqual(encoded.names(), ['cd1', 'cd2'])
        self.assertEqual(encoded.get('cd2').get('subhash'), wire.Scalar(wire.STRING, 'h2'))

    def test_upload_puts_baseinfo_first_then_discs(self):
        info = params.UploadSubtitleInfo(idmovieimdb='0133093', sublanguageid='eng')
        discs = [params.UploadSubtitleParameters(sub_hash='h1', sub_content='H4sI')]

        encoded = params.encode_upload(info, discs)

        self.assertEqual(encoded.names(), ['baseinfo', 'cd1'])
        self.assertEqual(encoded.get('baseinfo').names(),
                         ['idmovieimdb', 'sublanguageid', 'moviereleasename', 'movieaka', 'subauthorcomment'])
        self.assertEqual(encoded.get('cd1').names()[-1], 'subcontent')
        self.assertEqual(encoded.get('cd1').get('subcontent'), wire.Scalar(wire.STRING, 'H4sI'))

    def test_non_numeric_ids_are_validation_errors(self):
        with self.assertRaises(ValidationError):
            params.encode_ids(['1951976', 'abc'])
        with self.assertRaises(ValidationError):
            params.encode_vote(None, 5)
        with self.assertRaises(ValidationError):
            params.encode_comment('x1', 'nice', False)

    def test_comment_flag_is_sent_as_int(self):
        encoded = params.encode_comment(77, 'wrong timing', True)

        self.assertEqual(encoded.get('badsubtitle'), wire.Scalar(wire.INT, 1))
        self.assertEqual(encoded.get('idsubtitle'), wire.Scalar(wire.INT, 77))


if __name__ == '__main__':
    unittest.main()
