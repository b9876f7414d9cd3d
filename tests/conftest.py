"""Shared test fixtures for clashyaml."""

from __future__ import annotations

import pytest

from clashyaml.parser.loader import ConfigLoader


@pytest.fixture
def loader() -> ConfigLoader:
    return ConfigLoader()


SAMPLE_CONFIG_YAML = """\
# Clash configuration
port: 7890
socks-port: 7891
allow-lan: false
mode: rule
external-controller: 127.0.0.1:9090

dns:
  enable: true
  nameserver:
    - 223.5.5.5

proxies:
  - name: hk-01
    type: ss
    server: hk.example.com
    port: 8388
    udp: yes

proxy-groups:
  - name: Proxy
    type: select
    proxies: [hk-01, DIRECT]

rules:
  - DOMAIN-SUFFIX,google.com,Proxy
  - MATCH,DIRECT
"""
