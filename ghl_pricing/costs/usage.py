"""
Usage cost breakdowns for messaging, voice and email.

Each calculator takes an explicit usage record and returns a frozen
breakdown with per-component costs and a total.
"""

from dataclasses import dataclass

from ..rates.table import (
    EMAIL_ADDONS,
    SMS_CARRIER_FEE_PROFILES,
    get_usage_service_by_id,
)
from .basic import calculate_metered_cost, calculate_per_thousand_cost

SMS_RATE = get_usage_service_by_id("sms_outbound").rate
MMS_OUTBOUND_RATE = get_usage_service_by_id("mms_outbound").rate
MMS_INBOUND_RATE = get_usage_service_by_id("mms_inbound").rate
VOICE_OUTBOUND_RATE = get_usage_service_by_id("call_outbound").rate
VOICE_INBOUND_RATE = get_usage_service_by_id("call_inbound").rate
VOICE_RECORDING_RATE = get_usage_service_by_id("call_recording").rate
VOICE_TRANSCRIPTION_RATE = get_usage_service_by_id("call_transcription").rate
VOICEMAIL_DROP_RATE = get_usage_service_by_id("voicemail_drop").rate
EMAIL_RATE_PER_1000 = get_usage_service_by_id("lc_email").rate
VERIFICATION_RATE_PER_1000 = get_usage_service_by_id("email_verification").rate
DEDICATED_IP_PRICE = EMAIL_ADDONS[0].monthly_price


def resolve_carrier_fee(profile: str) -> float:
    """Per-segment carrier fee for a profile, unknown profiles use the weighted average."""
    return SMS_CARRIER_FEE_PROFILES.get(profile, SMS_CARRIER_FEE_PROFILES["weighted"])


@dataclass(frozen=True)
class MessagingUsage:
    """Monthly SMS/MMS volumes."""
    sms_segments: float = 0.0
    mms_messages: float = 0.0
    outbound_split: float = 50.0       # % of MMS that is outbound
    carrier_fee_profile: str = "weighted"


@dataclass(frozen=True)
class MessagingCost:
    """SMS/MMS cost breakdown."""
    sms: float
    mms_outbound: float
    mms_inbound: float
    carrier_fee_rate: float

    @property
    def total(self) -> float:
        return self.sms + self.mms_outbound + self.mms_inbound


def calculate_messaging_cost(usage: MessagingUsage) -> MessagingCost:
    """
    SMS and MMS cost with carrier surcharges

    Every SMS segment and every MMS message carries the carrier fee of the
    selected profile. MMS volume is split between outbound and inbound rates
    by the outbound percentage.
    """
    carrier_fee = resolve_carrier_fee(usage.carrier_fee_profile)

    sms_cost = calculate_metered_cost(usage.sms_segments, SMS_RATE + carrier_fee)

    mms_outbound = usage.mms_messages * (usage.outbound_split / 100)
    mms_inbound = usage.mms_messages * (1 - usage.outbound_split / 100)

    return MessagingCost(
        sms=sms_cost,
        mms_outbound=calculate_metered_cost(mms_outbound, MMS_OUTBOUND_RATE + carrier_fee),
        mms_inbound=calculate_metered_cost(mms_inbound, MMS_INBOUND_RATE + carrier_fee),
        carrier_fee_rate=carrier_fee,
    )


@dataclass(frozen=True)
class VoiceUsage:
    """Monthly call volumes and options."""
    outbound_minutes: float = 0.0
    inbound_minutes: float = 0.0
    call_recording: bool = False
    transcription: bool = False
    voicemail_drops: float = 0.0


@dataclass(frozen=True)
class VoiceCost:
    """Voice cost breakdown."""
    outbound: float
    inbound: float
    recording: float
    transcription: float
    voicemail: float

    @property
    def total(self) -> float:
        return self.outbound + self.inbound + self.recording + self.transcription + self.voicemail


def calculate_voice_cost(usage: VoiceUsage) -> VoiceCost:
    """
    Voice cost for outbound/inbound minutes, optional recording and
    transcription on all minutes, and voicemail drops
    """
    total_minutes = usage.outbound_minutes + usage.inbound_minutes

    recording = calculate_metered_cost(total_minutes, VOICE_RECORDING_RATE) if usage.call_recording else 0.0
    transcription = (
        calculate_metered_cost(total_minutes, VOICE_TRANSCRIPTION_RATE) if usage.transcription else 0.0
    )

    return VoiceCost(
        outbound=calculate_metered_cost(usage.outbound_minutes, VOICE_OUTBOUND_RATE),
        inbound=calculate_metered_cost(usage.inbound_minutes, VOICE_INBOUND_RATE),
        recording=recording,
        transcription=transcription,
        voicemail=calculate_metered_cost(usage.voicemail_drops, VOICEMAIL_DROP_RATE),
    )


@dataclass(frozen=True)
class EmailUsage:
    """Monthly email volumes and options."""
    emails_per_month: float = 0.0
    verifications: float = 0.0
    dedicated_ip: bool = False


@dataclass(frozen=True)
class EmailCost:
    """Email cost breakdown."""
    sending: float
    verification: float
    dedicated_ip: float

    @property
    def total(self) -> float:
        return self.sending + self.verification + self.dedicated_ip


def calculate_email_usage_cost(usage: EmailUsage) -> EmailCost:
    """Email sending and verification at per-1000 rates, plus the dedicated IP add-on"""
    return EmailCost(
        sending=calculate_per_thousand_cost(usage.emails_per_month, EMAIL_RATE_PER_1000),
        verification=calculate_per_thousand_cost(usage.verifications, VERIFICATION_RATE_PER_1000),
        dedicated_ip=DEDICATED_IP_PRICE if usage.dedicated_ip else 0.0,
    )
