# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# stdlib
from unittest import main, TestCase

# dominorest
from dominorest.client.server import DominoServer
from dominorest.common.exception import ApiNotAvailable, HttpResponseError
from dominorest.common.test import api_catalogue, FakeSession, make_response, openapi_document, \
     openapi_document_operation_count

# ################################################################################################################################
# ################################################################################################################################

base_url = 'https://domino.example.com:8880'

# ################################################################################################################################
# ################################################################################################################################

class DominoServerTestCase(TestCase):

    def test_available_apis(self):

        session = FakeSession([make_response(200, api_catalogue)])
        server = DominoServer(base_url + '/', session)

        self.assertListEqual(sorted(server.available_apis()), ['basis', 'setup'])
        self.assertListEqual(sorted(server.available_apis()), ['basis', 'setup'])

        # The catalogue is read only once
        self.assertEqual(session.call_count, 1)
        self.assertEqual(session.calls[0]['url'], base_url + '/api')

        meta = server.api_map['setup']
        self.assertEqual(meta.mount_path, '/api/setup-v1')
        self.assertEqual(meta.file_name, '/schema/openapi.setup.json')
        self.assertEqual(meta.title, 'Domino REST API setup')

# ################################################################################################################################

    def test_get_connector(self):

        session = FakeSession([make_response(200, api_catalogue), make_response(200, openapi_document)])
        server = DominoServer(base_url, session)

        connector = server.get_connector('basis')

        self.assertEqual(connector.meta.name, 'basis')
        self.assertEqual(len(connector.get_operations()), openapi_document_operation_count)
        self.assertEqual(session.calls[1]['url'], base_url + '/api/v1/schema/openapi.basis.json')

        # The same connector is returned each time without loading its document again
        self.assertIs(server.get_connector('basis'), connector)
        self.assertEqual(session.call_count, 2)

# ################################################################################################################################

    def test_available_operations(self):

        session = FakeSession([make_response(200, api_catalogue), make_response(200, openapi_document)])
        server = DominoServer(base_url, session)

        operations = server.available_operations('basis')
        self.assertIn('getDocument', operations)

# ################################################################################################################################

    def test_api_not_available(self):

        session = FakeSession([make_response(200, api_catalogue)])
        server = DominoServer(base_url, session)

        with self.assertRaises(ApiNotAvailable) as ctx:
            _ = server.get_connector('admin')

        self.assertEqual(ctx.exception.api_name, 'admin')
        self.assertEqual(ctx.exception.msg, "API 'admin' not available on this server.")

        # Nothing is fetched for an unknown API
        self.assertEqual(session.call_count, 1)

# ################################################################################################################################

    def test_catalogue_error(self):

        session = FakeSession([make_response(500, 'Internal error')])
        server = DominoServer(base_url, session)

        with self.assertRaises(HttpResponseError) as ctx:
            _ = server.available_apis()

        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(ctx.exception.msg, 'Internal Server Error')

# ################################################################################################################################
# ################################################################################################################################

if __name__ == '__main__':
    _ = main()

# ################################################################################################################################
# ################################################################################################################################
