# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# stdlib
from dataclasses import dataclass
from unittest import main, TestCase

# dominorest
from dominorest.common.model import ApiMeta, OperationParam, ParamsModel, RequestOptions, ResponseEnvelope, \
     RestCredentials
from dominorest.common.test import api_catalogue

# ################################################################################################################################
# ################################################################################################################################

@dataclass
class ViewEntriesParams(ParamsModel):
    count: 'int | None' = None
    start: 'int | None' = None
    documents: 'bool | None' = None
    search: 'str | None' = None

# ################################################################################################################################
# ################################################################################################################################

class RestCredentialsTestCase(TestCase):

    def test_from_dict(self):

        credentials = RestCredentials.from_dict({
            'type': 'oauth',
            'appId': 'app1',
            'appSecret': 'secret1',
            'refreshToken': 'refresh1',
            'scope': None,
            'unknown': 'ignored',
        })

        self.assertEqual(credentials.type, 'oauth')
        self.assertEqual(credentials.app_id, 'app1')
        self.assertEqual(credentials.app_secret, 'secret1')
        self.assertEqual(credentials.refresh_token, 'refresh1')
        self.assertEqual(credentials.scope, '')
        self.assertFalse(hasattr(credentials, 'unknown'))
        self.assertIs(credentials.validate(), credentials)

# ################################################################################################################################

    def test_from_dict_only_sets_fields(self):

        credentials = RestCredentials.from_dict({
            'userName': 'user1',
            'passWord': 'pass1',
            'validate': 'abc',
            'from_dict': 'def',
        })

        self.assertNotIn('validate', vars(credentials))
        self.assertNotIn('from_dict', vars(credentials))
        self.assertIs(credentials.validate(), credentials)

# ################################################################################################################################

    def test_from_dict_basic(self):

        credentials = RestCredentials.from_dict({'userName': 'user1', 'passWord': 'pass1', 'scope': '$DATA'})

        self.assertEqual(credentials.type, 'basic')
        self.assertEqual(credentials.username, 'user1')
        self.assertEqual(credentials.password, 'pass1')
        self.assertEqual(credentials.scope, '$DATA')

# ################################################################################################################################
# ################################################################################################################################

class ModelTestCase(TestCase):

    def test_api_meta(self):

        meta = ApiMeta.from_dict(api_catalogue['basis'])

        self.assertEqual(meta.name, 'basis')
        self.assertEqual(meta.mount_path, '/api/v1')
        self.assertEqual(meta.file_name, '/schema/openapi.basis.json')

        meta = ApiMeta.from_dict({'mountPath': '/api/admin-v1'}, 'admin')
        self.assertEqual(meta.name, 'admin')
        self.assertEqual(meta.title, '')

# ################################################################################################################################

    def test_operation_param_defaults(self):

        param = OperationParam.from_dict({'name': 'count'})

        self.assertEqual(param.location, 'query')
        self.assertFalse(param.required)

# ################################################################################################################################

    def test_params_model(self):

        model = ViewEntriesParams(count=10, documents=False, search='name=abc')

        self.assertDictEqual(model.to_params(), {'count': '10', 'documents': 'false', 'search': 'name=abc'})

        options = RequestOptions.from_model(model, 'customers', body='{}')

        self.assertEqual(options.data_source, 'customers')
        self.assertEqual(options.params['count'], '10')
        self.assertEqual(options.body, '{}')

# ################################################################################################################################

    def test_request_options_are_independent(self):

        options1 = RequestOptions()
        options2 = RequestOptions()
        options1.params['a'] = 1

        self.assertDictEqual(options2.params, {})

# ################################################################################################################################

    def test_response_envelope(self):

        class _Inner:
            is_closed = False

            def close(self):
                self.is_closed = True

        inner = _Inner()

        for status, is_ok in ((199, False), (200, True), (204, True), (299, True), (300, False), (404, False)):
            self.assertEqual(ResponseEnvelope(status, '', {}, None).is_ok, is_ok)

        envelope = ResponseEnvelope(200, 'OK', {'Content-Type': 'text/plain'}, iter([b'abc']), inner)
        self.assertEqual(envelope.content_type, 'text/plain')

        envelope.close()
        self.assertTrue(inner.is_closed)

# ################################################################################################################################
# ################################################################################################################################

if __name__ == '__main__':
    _ = main()

# ################################################################################################################################
# ################################################################################################################################
