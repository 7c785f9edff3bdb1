from datetime import datetime, timedelta, timezone

import pytest
import requests
from rest_framework.test import APIClient


class SteppingClock:
	"""Horloge qui renvoie `start`, puis `start + step`, `start + 2*step`..."""

	def __init__(self, start=None, step=timedelta(minutes=1)):
		self.current = start or datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)
		self.step = step

	def __call__(self):
		value = self.current
		self.current = self.current + self.step
		return value


class APIClientSession:
	"""Remplace `requests.Session` en envoyant les requêtes aux vues Django."""

	def __init__(self, client, host="http://testserver"):
		self.client = client
		self.host = host
		self.calls = []

	def request(self, method, url, json=None, headers=None, timeout=None):
		path = url[len(self.host):]
		self.calls.append((method, path, json))
		send = getattr(self.client, method.lower())
		if json is None:
			django_response = send(path)
		else:
			django_response = send(path, json, format="json")

		response = requests.Response()
		response.status_code = django_response.status_code
		response._content = django_response.content
		response.encoding = "utf-8"
		response.url = url
		return response


@pytest.fixture
def api_client():
	return APIClient()


@pytest.fixture
def clock():
	return SteppingClock()


@pytest.fixture
def client_session(api_client):
	return APIClientSession(api_client)
