"""Bundled NFL sample used for demos and smoke checks."""

from __future__ import annotations

from typing import List

from coachtree.models import Row

from .rows import parse_rows


SAMPLE_CSV = """Season,head_coach,coordinator,role,team,wins,losses,ties
2021,Andy Reid,Eric Bieniemy,Offensive Coordinator,Kansas City Chiefs,12,5,0
2021,Andy Reid,Steve Spagnuolo,Defensive Coordinator,Kansas City Chiefs,12,5,0
2020,Andy Reid,Eric Bieniemy,Offensive Coordinator,Kansas City Chiefs,14,2,0
2020,Andy Reid,Steve Spagnuolo,Defensive Coordinator,Kansas City Chiefs,14,2,0
2021,Sean McVay,Kevin O'Connell,Offensive Coordinator,Los Angeles Rams,12,5,0
2021,Sean McVay,Raheem Morris,Defensive Coordinator,Los Angeles Rams,12,5,0
2020,Sean McVay,Kevin O'Connell,Offensive Coordinator,Los Angeles Rams,10,6,0
2020,Sean McVay,Brandon Staley,Defensive Coordinator,Los Angeles Rams,10,6,0
2022,Kevin O'Connell,Wes Phillips,Offensive Coordinator,Minnesota Vikings,13,4,0
2022,Kevin O'Connell,Ed Donatell,Defensive Coordinator,Minnesota Vikings,13,4,0
2022,Brandon Staley,Joe Lombardi,Offensive Coordinator,Los Angeles Chargers,10,7,0
2022,Brandon Staley,Renaldo Hill,Defensive Coordinator,Los Angeles Chargers,10,7,0
2019,Matt LaFleur,Nathaniel Hackett,Offensive Coordinator,Green Bay Packers,13,3,0
2019,Matt LaFleur,Mike Pettine,Defensive Coordinator,Green Bay Packers,13,3,0
2022,Nathaniel Hackett,Justin Outten,Offensive Coordinator,Denver Broncos,4,11,0
2022,Nathaniel Hackett,Ejiro Evero,Defensive Coordinator,Denver Broncos,4,11,0
2018,Sean McVay,Matt LaFleur,Offensive Coordinator,Los Angeles Rams,13,3,0
2018,Sean McVay,Wade Phillips,Defensive Coordinator,Los Angeles Rams,13,3,0
"""


def sample_rows() -> List[Row]:
    return parse_rows(SAMPLE_CSV)
