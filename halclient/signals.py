from blinker import Namespace

_halclient = Namespace()

before_request = _halclient.signal('before-request')

after_request = _halclient.signal('after-request')
