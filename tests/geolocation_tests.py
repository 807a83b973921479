import unittest
from unittest import mock

from components import geolocation
from components.geolocation import BrowserGeolocation
from constants import UI_COPY
from core.errors import GeolocationUnavailable


class BrowserGeolocationTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.provider = BrowserGeolocation(timeout=3)
        self.successes = []
        self.failures = []

    async def _request_with(self, **run_javascript_kwargs):
        run_javascript = mock.AsyncMock(**run_javascript_kwargs)
        with mock.patch.object(geolocation.ui, 'run_javascript', run_javascript):
            await self.provider._request(self.successes.append, self.failures.append)
        return run_javascript

    async def test_position_is_forwarded(self):
        run_javascript = await self._request_with(return_value={'latitude': 40.0, 'longitude': -75.0})

        self.assertEqual(self.successes, [{'latitude': 40.0, 'longitude': -75.0}])
        self.assertEqual(self.failures, [])
        run_javascript.assert_awaited_once_with(geolocation.GET_POSITION_JS, timeout=3)

    async def test_browser_error_payload(self):
        await self._request_with(return_value={'error': 'User denied Geolocation'})

        self.assertEqual(self.successes, [])
        self.assertEqual(len(self.failures), 1)
        self.assertIsInstance(self.failures[0], GeolocationUnavailable)
        self.assertEqual(str(self.failures[0]), 'User denied Geolocation')

    async def test_non_dict_result(self):
        await self._request_with(return_value=None)

        self.assertEqual(self.successes, [])
        self.assertIsInstance(self.failures[0], GeolocationUnavailable)
        self.assertEqual(str(self.failures[0]), UI_COPY['geolocation_failed'])

    async def test_timeout(self):
        await self._request_with(side_effect=TimeoutError())

        self.assertEqual(self.successes, [])
        self.assertIsInstance(self.failures[0], GeolocationUnavailable)
        self.assertIn('timed out', str(self.failures[0]))


if __name__ == "__main__":
    unittest.main()
