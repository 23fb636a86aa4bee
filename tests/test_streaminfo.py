import pytest

from libflac import BoundsError, streaminfo


def test_channels_bias(streaminfo_body):
    assert streaminfo.parse(streaminfo_body(channel_bits=0)).channels == 1
    assert streaminfo.parse(streaminfo_body(channel_bits=7)).channels == 8


def test_bits_per_sample_bias(streaminfo_body):
    assert streaminfo.parse(streaminfo_body(bps_bits=0)).bits_per_sample == 1
    assert streaminfo.parse(streaminfo_body(bps_bits=0x1F)).bits_per_sample == 32


def test_md5_all_zero(streaminfo_body):
    assert streaminfo.parse(streaminfo_body(md5=bytes(16))).md5_signature == '0' * 32


def test_md5_byte_order(streaminfo_body):
    sib = streaminfo.parse(streaminfo_body(md5=bytes(range(1, 17))))
    assert sib.md5_signature == '0102030405060708090a0b0c0d0e0f10'


def test_all_fields(streaminfo_body):
    sib = streaminfo.parse(streaminfo_body(
        min_block=16, max_block=65535, min_frame=0x00ABCD, max_frame=0xFFFFFF,
        sample_rate=96000, channel_bits=5, bps_bits=23, total=0xFFFFFFFFF))
    assert sib.min_block_size == 16
    assert sib.max_block_size == 65535
    assert sib.min_frame_size == 0x00ABCD
    assert sib.max_frame_size == 0xFFFFFF
    assert sib.sample_rate == 96000
    assert sib.channels == 6
    assert sib.bits_per_sample == 24
    assert sib.total_samples == 0xFFFFFFFFF


def test_fields_do_not_bleed(streaminfo_body):
    sib = streaminfo.parse(streaminfo_body(max_block=0xFFFF, min_frame=0, max_frame=0,
                                           sample_rate=0, channel_bits=7, bps_bits=0, total=0))
    assert sib.min_frame_size == 0
    assert sib.max_frame_size == 0
    assert sib.sample_rate == 0
    assert sib.bits_per_sample == 1
    assert sib.total_samples == 0


def test_out_of_range_sample_rate_is_kept(streaminfo_body):
    assert streaminfo.parse(streaminfo_body(sample_rate=0xFFFFF)).sample_rate == 0xFFFFF


def test_short_body(streaminfo_body):
    with pytest.raises(BoundsError):
        streaminfo.parse(streaminfo_body()[:33])


def test_longer_body_reads_first_34_bytes(streaminfo_body):
    assert streaminfo.parse(streaminfo_body(sample_rate=48000) + b'\xff' * 6).sample_rate == 48000


def test_duration(streaminfo_body):
    assert streaminfo.parse(streaminfo_body(sample_rate=44100, total=88200)).duration == 2.0
    assert streaminfo.parse(streaminfo_body(sample_rate=0, total=88200)).duration == 0.0


def test_immutable(streaminfo_body):
    sib = streaminfo.parse(streaminfo_body())
    with pytest.raises(AttributeError):
        sib.sample_rate = 1
