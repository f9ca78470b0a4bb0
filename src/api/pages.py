"""
Location Page
-------------
HTML page served for a shareable link. The embedded script asks the browser
for its position, waits GEOCODE_DELAY_MS, then posts the coordinates to the
geocode endpoint and writes the resolved address into the page.
"""
import html
import json
from urllib.parse import quote
from string import Template

# Delay between obtaining the position and calling the geocode endpoint
GEOCODE_DELAY_MS = 1000

# The script avoids the dollar sign so Template only sees the placeholders below
LOCATION_PAGE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Get Location</title>
</head>
<body>
  <h1>Share Your Location</h1>
  <p id="status">Requesting location...</p>
  <p id="location" style="white-space: pre-line"></p>
  <p>$attribution</p>
  <p><small>Link: $link_id_html</small></p>
  <script>
    const linkId = $link_id_js;
    const geocodeUrl = $geocode_url_js;

    function setStatus(text) {
      document.getElementById('status').textContent = text;
    }

    async function fetchGeocodeWithDelay(latitude, longitude) {
      await new Promise(resolve => setTimeout(resolve, $delay_ms));
      try {
        const response = await fetch(geocodeUrl, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({ latitude, longitude })
        });
        if (!response.ok) {
          throw new Error('Failed to fetch address: ' + response.statusText);
        }
        const data = await response.json();
        document.getElementById('location').textContent =
          'Location: Latitude ' + latitude + ', Longitude ' + longitude +
          ', Address: ' + data.formattedAddress + '\\n' +
          'Details: Street: ' + data.street + ', City: ' + data.city +
          ', State: ' + data.state + ', Postcode: ' + data.postcode +
          ', Country: ' + data.country;
        setStatus('Location fetched!');
      } catch (error) {
        console.error('Error fetching address for link ' + linkId + ':', error.message);
        setStatus('Error: ' + error.message);
      }
    }

    if (navigator.geolocation) {
      navigator.geolocation.getCurrentPosition(
        (position) => {
          const { latitude, longitude } = position.coords;
          setStatus('Fetching address...');
          fetchGeocodeWithDelay(latitude, longitude);
        },
        (error) => {
          console.error('Geolocation error:', error.message);
          setStatus('Error: ' + error.message);
        }
      );
    } else {
      setStatus('Geolocation is not supported by this browser.');
    }
  </script>
</body>
</html>
""")


def _js_string(value):
    # json.dumps leaves "</" intact, which would close the script element
    return json.dumps(value).replace("</", "<\\/")


def render_location_page(link_id, attribution=""):
    """Render the capture page for one link id. Any id is accepted."""
    return LOCATION_PAGE.substitute(
        attribution=attribution,
        link_id_html=html.escape(link_id),
        link_id_js=_js_string(link_id),
        geocode_url_js=_js_string(f"/api/geocode/{quote(link_id, safe='')}"),
        delay_ms=GEOCODE_DELAY_MS,
    )
