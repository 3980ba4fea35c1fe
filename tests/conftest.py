import pytest

from flickr_typed.schemas.base import decode_response


OK_BODY = b'<?xml version="1.0" encoding="utf-8" ?>\n<rsp stat="ok">\n</rsp>\n'

FAIL_BODY = b"""<?xml version="1.0" encoding="utf-8" ?>
<rsp stat="fail">
  <err code="1" msg="Photoset not found" />
</rsp>
"""

PHOTOSET_INFO_BODY = b"""<?xml version="1.0" encoding="utf-8" ?>
<rsp stat="ok">
  <photoset id="72157624618609504" owner="34427466731@N01" username="mahkittehs" primary="4847770787"
            secret="6abd09a292" server="4153" farm="5" photos="55" count_views="523" count_comments="1"
            count_photos="43" count_videos="12" can_comment="1" date_create="1280530593"
            date_update="1308091378" visibility_can_see_set="1" needs_interstitial="0">
    <title>Mah Kittehs</title>
    <description>Sixty and Niner.</description>
  </photoset>
</rsp>
"""

PHOTOSETS_LIST_BODY = b"""<?xml version="1.0" encoding="utf-8" ?>
<rsp stat="ok">
  <photosets page="1" pages="3" perpage="2" total="5" cancreate="1">
    <photoset id="72157626216528324" primary="5504567858" secret="017804c585" server="5174" farm="6"
              photos="22" count_photos="20" count_videos="2" count_views="137" count_comments="0"
              can_comment="1" date_create="1299514498" date_update="1300335009">
      <title>Avis Blanche</title>
      <description>My Grandma's Recipe File.</description>
    </photoset>
    <photoset id="72157624618609504" primary="4847770787" secret="6abd09a292" server="4153" farm="5"
              photos="55" count_photos="43" count_videos="12" count_views="523" count_comments="1"
              can_comment="0" date_create="1280530593" date_update="1308091378">
      <title>Mah Kittehs</title>
      <description />
    </photoset>
  </photosets>
</rsp>
"""

PHOTOSET_PHOTOS_BODY = b"""<?xml version="1.0" encoding="utf-8" ?>
<rsp stat="ok">
  <photoset id="72157624618609504" primary="4847770787" owner="34427466731@N01" ownername="mahkittehs"
            page="2" per_page="50" perpage="50" pages="3" total="120" title="Mah Kittehs">
    <photo id="4847770787" secret="6abd09a292" server="4153" farm="5" title="Niner"
           isprimary="1" ispublic="1" isfriend="0" isfamily="0" />
    <photo id="4847771021" secret="c2fe0f05bd" server="4113" farm="5" title="Sixty"
           isprimary="0" ispublic="0" isfriend="1" isfamily="1" />
  </photoset>
</rsp>
"""

PERSON_BODY = b"""<?xml version="1.0" encoding="utf-8" ?>
<rsp stat="ok">
  <person id="12037949754@N01" nsid="12037949754@N01" ispro="1" is_deleted="0" iconserver="122"
          iconfarm="1" path_alias="bees" has_stats="1" pro_badge="legacy" expire="0" upload_count="10"
          upload_limit="0" upload_limit_status="none" is_cognito_user="0"
          all_rights_reserved_photos_count="42" has_adfree="0" has_free_standard_shipping="1"
          has_free_educational_resources="0">
    <username>bees</username>
    <realname>Cal Henderson</realname>
    <mbox_sha1sum>eea6cd28e3d0003ab51b0058a684d94980b727ac</mbox_sha1sum>
    <location>Vancouver, Canada</location>
    <timezone label="Pacific Time (US &amp; Canada); Tijuana" offset="-08:00" timezone_id="America/Vancouver" />
    <description />
    <photosurl>https://www.flickr.com/photos/bees/</photosurl>
    <profileurl>https://www.flickr.com/people/bees/</profileurl>
    <photos>
      <firstdatetaken>2009-02-13 23:31:30</firstdatetaken>
      <firstdate>1071510391</firstdate>
      <count>449</count>
    </photos>
  </person>
</rsp>
"""

PEOPLE_PHOTOS_BODY = b"""<?xml version="1.0" encoding="utf-8" ?>
<rsp stat="ok">
  <photos page="2" pages="89" perpage="10" total="881">
    <photo id="2636" owner="47058503995@N01" secret="a123456" server="2" farm="1" title="test_04"
           ispublic="1" isfriend="0" isfamily="0" views="12" media="photo"
           url_o="https://live.staticflickr.com/2/2636_a123456_o.jpg" width_o="4000" height_o="3000"
           dateupload="1071510391" datetaken="2003-12-15 09:46:31" ownername="bees"
           tags="cat kitten" machine_tags="taxonomy:common=cat" latitude="49.2827"
           longitude="-123.1207" accuracy="16" pathalias="bees">
      <description>A very small cat</description>
    </photo>
    <photo id="2635" owner="47058503995@N01" secret="b123456" server="2" farm="1" title="test_03"
           ispublic="0" isfriend="1" isfamily="1" />
  </photos>
</rsp>
"""


class RecordingClient:
    """Stands in for FlickrClient: records requests and decodes a canned body."""

    def __init__(self, body=OK_BODY):
        self.body = body
        self.requests = []

    def execute(self, request, response_type):
        self.requests.append(request)
        return decode_response(response_type, self.body)

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture(autouse=True)
def flickr_env(monkeypatch, tmp_path):
    """Deterministic configuration for every test."""
    monkeypatch.setenv("API_KEY", "test-key")
    monkeypatch.setenv("API_SECRET", "test-secret")
    monkeypatch.delenv("OAUTH_TOKEN", raising=False)
    monkeypatch.delenv("OAUTH_TOKEN_SECRET", raising=False)
    monkeypatch.delenv("FLICKR_REST_URL", raising=False)
    monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("AUTH_PERMS", raising=False)
    monkeypatch.setenv("CACHE_DIR", str(tmp_path / "cache"))


@pytest.fixture
def with_user_token(monkeypatch):
    monkeypatch.setenv("OAUTH_TOKEN", "72157600000000000-abcdef0123456789")
    monkeypatch.setenv("OAUTH_TOKEN_SECRET", "0123456789abcdef")


@pytest.fixture
def recording_client():
    return RecordingClient()
