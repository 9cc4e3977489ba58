import pytest

from labviewer.replies import ReplyError, SimParameters, parse_reply


def test_ok_reply_with_parameters():
    reply = parse_reply(
        '<Reply Status="Ok"><Parameters CycleTime="50" SimTime="1800" '
        'CompassTime="4" ObstacleNoise="0.1" MotorsNoise="1.5"/></Reply>'
    )
    assert reply.status is True
    params = reply.parameters
    assert params.cycle_time == 50
    assert params.sim_time == 1800
    assert params.compass_time == 4
    assert params.obstacle_noise == 0.1
    assert params.motors_noise == 1.5


def test_refused_reply():
    reply = parse_reply('<Reply Status="Refused"/>')
    assert reply.status is False
    assert reply.parameters is None


def test_missing_parameters_keep_defaults():
    reply = parse_reply('<Reply Status="Ok"><Parameters SimTime="300"/></Reply>')
    assert reply.parameters == SimParameters(sim_time=300)


def test_negative_unsigned_reads_as_zero():
    reply = parse_reply('<Reply Status="Ok"><Parameters CycleTime="-5"/></Reply>')
    assert reply.parameters.cycle_time == 0


def test_bytes_input_with_nul():
    reply = parse_reply(b'<Reply Status="Ok"/>\0')
    assert reply.status is True


def test_parameters_without_reply_is_rejected():
    with pytest.raises(ReplyError):
        parse_reply('<Parameters SimTime="10"/>')


def test_unknown_tag_is_rejected():
    with pytest.raises(ReplyError):
        parse_reply('<Reply Status="Ok"><Extra/></Reply>')


def test_malformed_reply_is_rejected():
    with pytest.raises(ReplyError):
        parse_reply('<Reply Status="Ok">')


def test_empty_reply_is_rejected():
    with pytest.raises(ReplyError):
        parse_reply("")