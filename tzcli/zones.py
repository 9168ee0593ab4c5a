"""Time zone lookup and the relative time overview."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Iterable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

LOCAL_NAME = "Local"

# Known zones, grouped by region; each region's cities keep their listed order.
_ZONES_BY_REGION: dict[str, str] = {
    "Africa": """
        Abidjan Accra Addis_Ababa Algiers Asmara Bamako Bangui Banjul Bissau
        Blantyre Brazzaville Bujumbura Cairo Casablanca Ceuta Conakry Dakar
        Dar_es_Salaam Djibouti Douala El_Aaiun Freetown Gaborone Harare
        Johannesburg Juba Kampala Khartoum Kigali Kinshasa Lagos Libreville Lome
        Luanda Lubumbashi Lusaka Malabo Maputo Maseru Mbabane Mogadishu Monrovia
        Nairobi Ndjamena Niamey Nouakchott Ouagadougou Porto-Novo Sao_Tome
        Tripoli Tunis Windhoek
    """,
    "America": """
        Adak Anchorage Anguilla Antigua Araguaina Argentina/Buenos_Aires
        Argentina/Catamarca Argentina/Cordoba Argentina/Jujuy Argentina/La_Rioja
        Argentina/Mendoza Argentina/Rio_Gallegos Argentina/Salta
        Argentina/San_Juan Argentina/San_Luis Argentina/Tucuman
        Argentina/Ushuaia Aruba Asuncion Atikokan Bahia Bahia_Banderas Barbados
        Belem Belize Blanc-Sablon Boa_Vista Bogota Boise Cambridge_Bay
        Campo_Grande Cancun Caracas Cayenne Cayman Chicago Chihuahua Costa_Rica
        Creston Cuiaba Curacao Danmarkshavn Dawson Dawson_Creek Denver Detroit
        Dominica Edmonton Eirunepe El_Salvador Fort_Nelson Fortaleza Glace_Bay
        Godthab Goose_Bay Grand_Turk Grenada Guadeloupe Guatemala Guayaquil
        Guyana Halifax Havana Hermosillo Indiana/Indianapolis Indiana/Knox
        Indiana/Marengo Indiana/Petersburg Indiana/Tell_City Indiana/Vevay
        Indiana/Vincennes Indiana/Winamac Inuvik Iqaluit Jamaica Juneau
        Kentucky/Louisville Kentucky/Monticello Kralendijk La_Paz Lima
        Los_Angeles Lower_Princes Maceio Managua Manaus Marigot Martinique
        Matamoros Mazatlan Menominee Merida Metlakatla Mexico_City Miquelon
        Moncton Monterrey Montevideo Montserrat Nassau New_York Nipigon Nome
        Noronha North_Dakota/Beulah North_Dakota/Center North_Dakota/New_Salem
        Nuuk Ojinaga Panama Pangnirtung Paramaribo Phoenix Port-au-Prince
        Port_of_Spain Porto_Velho Puerto_Rico Punta_Arenas Rainy_River
        Rankin_Inlet Recife Regina Resolute Rio_Branco Santarem Santiago
        Santo_Domingo Sao_Paulo Scoresbysund Sitka St_Barthelemy St_Johns
        St_Kitts St_Lucia St_Thomas St_Vincent Swift_Current Tegucigalpa Thule
        Thunder_Bay Tijuana Toronto Tortola Vancouver Whitehorse Winnipeg
        Yakutat Yellowknife
    """,
    "Antarctica": """
        Casey Davis DumontDUrville Macquarie Mawson Palmer Rothera Syowa Troll
        Vostok
    """,
    "Arctic": "Longyearbyen",
    "Asia": """
        Aden Almaty Amman Anadyr Aqtau Aqtobe Ashgabat Atyrau Baghdad Bahrain
        Baku Bangkok Barnaul Beirut Bishkek Brunei Chita Choibalsan Colombo
        Damascus Dhaka Dili Dubai Dushanbe Famagusta Gaza Hebron Ho_Chi_Minh
        Hong_Kong Hovd Irkutsk Jakarta Jayapura Jerusalem Kabul Kamchatka Karachi
        Kathmandu Khandyga Kolkata Krasnoyarsk Kuala_Lumpur Kuching Kuwait Macau
        Magadan Makassar Manila Muscat Nicosia Novokuznetsk Novosibirsk Omsk Oral
        Phnom_Penh Pontianak Pyongyang Qatar Qostanay Qyzylorda Riyadh Sakhalin
        Samarkand Seoul Shanghai Singapore Srednekolymsk Taipei Tashkent Tbilisi
        Tehran Thimphu Tokyo Tomsk Ulaanbaatar Urumqi Ust-Nera Vientiane
        Vladivostok Yakutsk Yangon Yekaterinburg Yerevan
    """,
    "Atlantic": """
        Azores Bermuda Canary Cape_Verde Faroe Madeira Reykjavik South_Georgia
        St_Helena Stanley
    """,
    "Australia": """
        Adelaide Brisbane Broken_Hill Darwin Eucla Hobart Lindeman Lord_Howe
        Melbourne Perth Sydney
    """,
    "Europe": """
        Amsterdam Andorra Astrakhan Athens Belgrade Berlin Bratislava Brussels
        Bucharest Budapest Busingen Chisinau Copenhagen Dublin Gibraltar Guernsey
        Helsinki Isle_of_Man Istanbul Jersey Kaliningrad Kiev Kirov Lisbon
        Ljubljana London Luxembourg Madrid Malta Mariehamn Minsk Monaco Moscow
        Oslo Paris Podgorica Prague Riga Rome Samara San_Marino Sarajevo Saratov
        Simferopol Skopje Sofia Stockholm Tallinn Tirane Ulyanovsk Uzhgorod Vaduz
        Vatican Vienna Vilnius Volgograd Warsaw Zagreb Zaporozhye Zurich
    """,
    "Indian": """
        Antananarivo Chagos Christmas Cocos Comoro Kerguelen Mahe Maldives
        Mauritius Mayotte Reunion
    """,
    "Pacific": """
        Apia Auckland Bougainville Chatham Chuuk Easter Efate Enderbury Fakaofo
        Fiji Funafuti Galapagos Gambier Guadalcanal Guam Honolulu Kanton
        Kiritimati Kosrae Kwajalein Majuro Marquesas Midway Nauru Niue Norfolk
        Noumea Pago_Pago Palau Pitcairn Pohnpei Port_Moresby Rarotonga Saipan
        Tahiti Tarawa Tongatapu Wake Wallis
    """,
}

TIME_ZONES: tuple[str, ...] = tuple(
    f"{region}/{city}"
    for region, cities in _ZONES_BY_REGION.items()
    for city in cities.split()
)

_TIMESTAMP = "%Y-%m-%d %H:%M:%S"
_RULE = "─" * 60


class ZoneMatchError(LookupError):
    """Raised when a query matches no zone or more than one."""

    def __init__(self, query: str, matches: Iterable[str] = ()) -> None:
        self.query = query
        self.matches = tuple(matches)
        if self.matches:
            message = f"multiple matches found for '{query}': [{' '.join(self.matches)}]"
        else:
            message = f"no timezone found matching: {query}"
        super().__init__(message)


@dataclass(frozen=True)
class ZoneTime:
    """The current time in one configured zone, relative to local time."""

    name: str
    time: datetime
    offset_text: str
    emoji: str


def normalize(text: str) -> str:
    """Lower-case the text and drop underscores, slashes and spaces."""
    return text.lower().replace("_", "").replace("/", "").replace(" ", "")


def find_matching_zone(query: str) -> str:
    """Return the single known zone whose normalized name contains the query."""
    needle = normalize(query)
    matches = [zone for zone in TIME_ZONES if needle in normalize(zone)]
    if len(matches) != 1:
        raise ZoneMatchError(query, matches)
    return matches[0]


def _load_zone(zone: str, local: tzinfo) -> tzinfo | None:
    if zone == LOCAL_NAME:
        return local
    if zone in ("", "UTC"):
        return timezone.utc
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None


def _offset_seconds(moment: datetime) -> int:
    offset = moment.utcoffset()
    return int(offset.total_seconds()) if offset is not None else 0


def _local_now(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now().astimezone()
    if now.tzinfo is None:
        return now.astimezone()
    return now


def zone_times(zones: Iterable[str], now: datetime | None = None) -> list[ZoneTime]:
    """Return the valid zones with their times, sorted by hour and minute."""
    now = _local_now(now)
    local_offset = _offset_seconds(now)
    result = []
    for zone in zones:
        tz = _load_zone(zone, now.tzinfo)
        if tz is None:
            continue
        moment = now.astimezone(tz)
        zone_offset = _offset_seconds(moment)
        diff = zone_offset - local_offset
        diff_hours = abs(diff) // 3600 * (1 if diff >= 0 else -1)

        if zone == LOCAL_NAME:
            offset_text, emoji = "(you are here)", "🏠"
        elif zone_offset == local_offset:
            offset_text, emoji = "(same)", "🟢"
        elif diff_hours > 0:
            offset_text, emoji = f"(+{diff_hours}h)", "🌍"
        else:
            offset_text, emoji = f"({diff_hours}h)", "🌍"
        result.append(ZoneTime(zone, moment, offset_text, emoji))

    result.sort(key=lambda item: item.time.strftime("%H:%M"))
    return result


def format_zones(zones: Iterable[str], now: datetime | None = None) -> str:
    """Render the overview of the given zones as text."""
    zones = list(zones)
    now = _local_now(now)
    lines = [
        f"{zone:<20} ❌ Invalid timezone"
        for zone in zones
        if _load_zone(zone, now.tzinfo) is None
    ]
    lines.append("🕒 Timezone Overview (relative):")
    lines.append(_RULE)
    lines.append(f"🏠 {'Local':<20} {now.strftime(_TIMESTAMP)} {'(you are here)':<10}")
    lines.extend(
        f"{item.emoji} {item.name:<20} {item.time.strftime(_TIMESTAMP)} {item.offset_text:<10}"
        for item in zone_times(zones, now)
    )
    return "\n".join(lines) + "\n"


def print_zones(zones: Iterable[str]) -> None:
    """Print the overview of the given zones at the current time."""
    sys.stdout.write(format_zones(zones))
    sys.stdout.flush()