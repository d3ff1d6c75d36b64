import pytest

MASTER_PLAYLIST = """#EXTM3U
#EXT-X-VERSION:6
#EXT-X-INDEPENDENT-SEGMENTS

#EXT-X-MEDIA:TYPE=AUDIO,GROUP-ID="aac",LANGUAGE="en",NAME="English",DEFAULT=YES,URI="audio/en.m3u8"
#EXT-X-MEDIA:TYPE=AUDIO,GROUP-ID="aac",LANGUAGE="de",NAME="Deutsch",DEFAULT=NO,URI="audio/de.m3u8"
#EXT-X-MEDIA:TYPE=SUBTITLES,GROUP-ID="subs",LANGUAGE='fr',NAME="Francais",URI="subs/fr.m3u8"

#EXT-X-STREAM-INF:BANDWIDTH=2560000,AVERAGE-BANDWIDTH=2000000,RESOLUTION=1280x720,AUDIO="aac"
video/720p.m3u8
#EXT-X-STREAM-INF:BANDWIDTH=7680000,AVERAGE-BANDWIDTH=6000000,RESOLUTION=1920x1080,AUDIO="aac"
https://cdn.example.com/video/1080p.m3u8
#EXT-X-STREAM-INF:BANDWIDTH=1280000,AVERAGE-BANDWIDTH=1000000,RESOLUTION=640x360,AUDIO="aac"
video/360p.m3u8

#EXT-X-I-FRAME-STREAM-INF:BANDWIDTH=222552,RESOLUTION=1280x720,URI="iframe/720p.m3u8"
#EXT-X-I-FRAME-STREAM-INF:BANDWIDTH=77758,RESOLUTION=640x360,URI="iframe/360p.m3u8"
"""


@pytest.fixture
def master_text() -> str:
    return MASTER_PLAYLIST
