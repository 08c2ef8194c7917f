# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for ConfigTree tests."""

import pytest

from genro_configtree import load_from_string

APP_XML = """<?xml version="1.0" encoding="UTF-8"?>
<app name="demo" version="1.0">
    <db host="localhost" port="5432">main</db>
    <cache>
    </cache>
    <logger level="info"/>
</app>
"""

TWO_DBS_XML = """
<app>
    <db id="1"><host>alpha</host></db>
    <db id="2"><host>beta</host><host>gamma</host></db>
</app>
"""


@pytest.fixture
def app_xml():
    return APP_XML


@pytest.fixture
def app_root():
    return load_from_string(APP_XML)


@pytest.fixture
def two_dbs_root():
    return load_from_string(TWO_DBS_XML)
