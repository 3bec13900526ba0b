
def addGreet(ctx):
    ctx.addIncludePaths('/opt/greet/include')
    ctx.addLibPaths('/opt/greet/lib')
    ctx.addLinks('greet_d', configs = ctx.debugConfigs)
    ctx.addLinks('greet', configs = ctx.releaseConfigs)

project = {
    'name' : 'customlib',
    'configs' : ['Debug', 'Testing', 'Release'],
}

externlibs = {
    'greet' : addGreet,
    'zz' : {
        'win-names' : 'zz1',
        'unix-names' : 'zz',
        'no-delayload' : True,
    },
}

packages = [
    {
        'name' : 'hello',
        'lang' : 'c',
        'files' : ['hello.c'],
        'extern-libs' : ['greet', 'zz'],
        'configs' : {
            'Testing' : { 'debug-libs' : False },
        },
    },
]
